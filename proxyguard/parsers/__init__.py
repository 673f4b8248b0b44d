from .java import JavaModelBuilder

__all__ = ["JavaModelBuilder"]
