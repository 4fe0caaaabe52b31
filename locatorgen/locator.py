"""Translate selector text into locator code for a target language."""

from __future__ import annotations

import structlog

from locatorgen.backends.factory import create_locator_factory
from locatorgen.exceptions import UnknownLocatorKindError
from locatorgen.generator.traversal import inner_as_locator
from locatorgen.selector.parser import parse_selector
from locatorgen.types import Language

logger = structlog.get_logger(__name__)


def as_locator(
    language: Language | str,
    selector: str,
    is_frame_locator: bool = False,
    tolerant: bool = False,
) -> str:
    """Render ``selector`` as the locator expression a developer would write.

    With ``tolerant`` set, selectors that cannot be parsed or translated are
    returned unchanged instead of raising. A backend that does not know a
    locator kind is an internal error and always raises.
    """
    factory = create_locator_factory(language)
    if not tolerant:
        return inner_as_locator(factory, parse_selector(selector), is_frame_locator)
    try:
        return inner_as_locator(factory, parse_selector(selector), is_frame_locator)
    except UnknownLocatorKindError:
        raise
    except Exception as e:
        logger.debug("locator_fallback", language=str(language), selector=selector, error=str(e))
        return selector
