from . import exceptions as ex
from .models import JavaMethod
from .program_model import ProgramModel


def proxyability_issues(method: JavaMethod, model: ProgramModel) -> list[str]:
    """Reasons why a subclass- or interface-based proxy cannot intercept ``method``.

    An empty list means the method is proxyable: it is not private, neither
    it nor its declaring class is final, and it is an instance method.
    """
    owner = model.require_class(method.owner)
    name = method.full_name

    issues: list[str] = []
    if method.is_private:
        issues.append(ex.NOT_PROXYABLE_PRIVATE.format(method=name))
    if method.is_final:
        issues.append(ex.NOT_PROXYABLE_FINAL_METHOD.format(method=name))
    if owner.is_final:
        issues.append(ex.NOT_PROXYABLE_FINAL_CLASS.format(method=name, owner=owner))
    if method.is_static:
        issues.append(ex.NOT_PROXYABLE_STATIC.format(method=name))
    return issues


def is_proxyable(method: JavaMethod, model: ProgramModel) -> bool:
    return not proxyability_issues(method, model)
