from __future__ import annotations

from themestyles.errors import UnknownTransformError
from themestyles.stylesheet.model import Stylesheet
from themestyles.transforms.base import IdentityTransform, RuleTransform
from themestyles.transforms.editor import EditorTransform
from themestyles.transforms.print_css import PrintTransform

TRANSFORMS: dict[str, RuleTransform] = {
    "identity": IdentityTransform(),
    "print": PrintTransform(),
    "editor": EditorTransform(),
}


def get_transform(name: str) -> RuleTransform:
    """Return the registered transform variant called *name*."""
    try:
        return TRANSFORMS[name]
    except KeyError:
        raise UnknownTransformError(name, sorted(TRANSFORMS)) from None


def apply_transform(name: str, stylesheet: Stylesheet) -> Stylesheet:
    """Apply the transform variant *name* to *stylesheet*."""
    return get_transform(name).transform(stylesheet)


__all__ = [
    "TRANSFORMS",
    "RuleTransform",
    "IdentityTransform",
    "PrintTransform",
    "EditorTransform",
    "get_transform",
    "apply_transform",
]
