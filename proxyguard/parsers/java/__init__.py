from .model_builder import JavaModelBuilder

__all__ = ["JavaModelBuilder"]
