"""
================================================================================
Selector Strategy
================================================================================

Declarative description of one logical UI element:
    - A primary selector (the canonical query expression)
    - Ordered fallback selectors, tried in listed order
    - A human-readable description used for diagnostics and heuristics
    - A coarse element type driving the heuristic candidate table

The heuristic table is fixed and rule-based. Every ElementType member owns
exactly one candidate generator; generators are pure functions of the
lower-cased description.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Dict, Iterable, List, Tuple, Union


class ElementType(str, Enum):
    """Coarse element-type tag selecting the heuristic candidate generator."""

    BUTTON = "button"
    INPUT = "input"
    LINK = "link"
    TEXT = "text"
    GENERIC = "generic"

    @classmethod
    def parse(cls, value: Union[str, "ElementType"]) -> "ElementType":
        """
        Normalize a tag to an ElementType member.

        Raises:
            ValueError: If the tag is not one of the known element types
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            known = ", ".join(member.value for member in cls)
            raise ValueError(
                f"Unknown element type '{value}'. Expected one of: {known}"
            ) from None

    def candidates(self, description: str) -> List[str]:
        """
        Generate heuristic selectors for this element type.

        Args:
            description: Free-text element description (case-insensitive)

        Returns:
            Ordered, de-duplicated list of candidate selectors
        """
        text = _quote(description.strip().lower())
        if not text:
            return []
        generated = _CANDIDATE_GENERATORS[self](text)
        generated.extend(_common_candidates(text))
        return _dedupe(generated)


@dataclass(frozen=True)
class SelectorStrategy:
    """
    Immutable description of how to find one UI element.

    Attributes:
        primary: Canonical selector, tried first
        fallbacks: Alternate selectors, tried in order after the primary
        description: Human-readable label, also used as heuristic input
        element_type: Drives which heuristic candidates are generated

    Usage:
        >>> USERNAME = SelectorStrategy(
        ...     primary='[data-test="username"]',
        ...     fallbacks=['input[name="user-name"]', 'input[type="text"]'],
        ...     description="username input field",
        ...     element_type="input",
        ... )
    """

    primary: str
    fallbacks: Tuple[str, ...] = field(default_factory=tuple)
    description: str = ""
    element_type: ElementType = ElementType.GENERIC

    def __post_init__(self) -> None:
        if not isinstance(self.primary, str) or not self.primary.strip():
            raise ValueError("SelectorStrategy.primary must be a non-empty selector")
        if isinstance(self.fallbacks, str):
            raise ValueError("SelectorStrategy.fallbacks must be a sequence of selectors")

        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "fallbacks", tuple(self.fallbacks))
        object.__setattr__(self, "element_type", ElementType.parse(self.element_type))
        if not self.description:
            object.__setattr__(self, "description", self.primary)

    def selectors(self) -> Tuple[str, ...]:
        """Return the explicitly authored selectors: primary then fallbacks."""
        return (self.primary, *self.fallbacks)

    def heuristic_candidates(self) -> List[str]:
        """Return the generated candidates for this strategy."""
        return self.element_type.candidates(self.description)

    def with_primary(self, primary: str) -> "SelectorStrategy":
        """Return a copy with a different primary selector."""
        return replace(self, primary=primary)

    def with_fallbacks(self, fallbacks: Iterable[str]) -> "SelectorStrategy":
        """Return a copy with a different fallback list."""
        return replace(self, fallbacks=tuple(fallbacks))


# =============================================================================
# Heuristic Candidate Generators
# =============================================================================

def _quote(text: str) -> str:
    """Escape text for use inside a double-quoted selector argument."""
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _dedupe(selectors: Iterable[str]) -> List[str]:
    seen = set()
    ordered = []
    for selector in selectors:
        if selector not in seen:
            seen.add(selector)
            ordered.append(selector)
    return ordered


def _common_candidates(text: str) -> List[str]:
    """Attribute-substring candidates shared by every element type."""
    return [
        f'[aria-label*="{text}" i]',
        f'[data-test*="{text}"]',
        f'[data-testid*="{text}"]',
        f'[id*="{text}"]',
    ]


def _button_candidates(text: str) -> List[str]:
    candidates = [
        f'button:has-text("{text}")',
        f'[role="button"]:has-text("{text}")',
        f'input[type="button"][value*="{text}" i]',
        f'input[type="submit"][value*="{text}" i]',
        f'.btn:has-text("{text}")',
        f'.button:has-text("{text}")',
    ]

    if "login" in text:
        candidates.extend([
            'button[type="submit"]',
            'input[type="submit"]',
            '[data-test*="login"]',
            '[id*="login"]',
            '.login-btn',
        ])

    if "add" in text and "cart" in text:
        candidates.extend([
            '[data-test*="add-to-cart"]',
            '[data-test*="add"]',
            '.add-to-cart',
            'button:has-text("Add")',
        ])

    if "checkout" in text:
        candidates.extend([
            '[data-test*="checkout"]',
            '.checkout-btn',
            'button:has-text("Checkout")',
        ])

    return candidates


def _input_candidates(text: str) -> List[str]:
    candidates = [
        f'input[placeholder*="{text}" i]',
        f'input[name*="{text}"]',
        f'input[id*="{text}"]',
    ]

    if "username" in text:
        candidates.extend([
            'input[type="text"]',
            'input[name="username"]',
            'input[name="user"]',
            'input[id*="username"]',
            'input[id*="user"]',
        ])

    if "password" in text:
        candidates.extend([
            'input[type="password"]',
            'input[name="password"]',
            'input[name="pass"]',
            'input[id*="password"]',
        ])

    if "email" in text:
        candidates.extend([
            'input[type="email"]',
            'input[name="email"]',
            'input[id*="email"]',
        ])

    return candidates


def _link_candidates(text: str) -> List[str]:
    return [
        f'a:has-text("{text}")',
        f'[role="link"]:has-text("{text}")',
        f'a[href*="{text}"]',
        f'.link:has-text("{text}")',
    ]


def _text_candidates(text: str) -> List[str]:
    return [
        f':text("{text}")',
        f':text-is("{text}")',
        f'*:has-text("{text}")',
        f'.text:has-text("{text}")',
    ]


def _generic_candidates(text: str) -> List[str]:
    # Broadest table; the text match is last since it hits almost anything
    return [
        f'[data-test*="{text}"]',
        f'[data-testid*="{text}"]',
        f'[id*="{text}"]',
        f'[class*="{text}"]',
        f'[aria-label*="{text}" i]',
        f':text("{text}")',
    ]


_CANDIDATE_GENERATORS: Dict[ElementType, Callable[[str], List[str]]] = {
    ElementType.BUTTON: _button_candidates,
    ElementType.INPUT: _input_candidates,
    ElementType.LINK: _link_candidates,
    ElementType.TEXT: _text_candidates,
    ElementType.GENERIC: _generic_candidates,
}


__all__ = [
    "ElementType",
    "SelectorStrategy",
]
