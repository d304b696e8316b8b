"""
Heuristic element classifier. Pure Python, no AI.

Guesses a button's visual variant and size from its class names, and
decides whether a block element is a reusable layout template
(hero section, feature card, navigation, footer) from its shape.
"""

import re
from dataclasses import asdict, dataclass
from typing import Optional

from bs4 import BeautifulSoup, Tag

BUTTON_SELECTOR = 'button, .btn, .button, [class*="btn-"], [class*="button-"]'
TEMPLATE_SELECTOR = "section, div, header"

# Descendants that make a block worth looking at
SIGNIFICANT_SELECTOR = "h1, h2, h3, h4, p, img, button"
HERO_ACTION_SELECTOR = "button, .btn, .button, a"

MIN_TEMPLATE_HTML = 50
HERO_MIN_HTML = 200
CARD_MIN_HTML = 100
CARD_MAX_HTML = 500

# Named component classes (btn-primary) are matched case-insensitively,
# utility classes (bg-blue-500) are not.
_PRIMARY = re.compile(r"(btn|button)-primary", re.I)
_SECONDARY = re.compile(r"(btn|button)-secondary", re.I)
_OUTLINE = re.compile(r"(btn|button)-outline", re.I)
_GHOST = re.compile(r"(btn|button)-ghost", re.I)
_BG_PRIMARY = re.compile(r"bg-(blue|primary)")
_BG_SECONDARY = re.compile(r"bg-(gray|grey|secondary)")

_SIZE_SM = re.compile(r"(btn|button)-sm", re.I)
_SIZE_LG = re.compile(r"(btn|button)-lg", re.I)
_PAD_SM = re.compile(r"p-[1-2]")
_PAD_LG = re.compile(r"p-[4-6]")


@dataclass
class ExtractedButton:
    type: str
    variant: str  # default | secondary | outline | ghost
    size: str  # default | sm | lg
    text: str
    code: str
    class_name: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ExtractedTemplate:
    name: str
    component: str
    code: str

    def to_dict(self) -> dict:
        return asdict(self)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def parse_html(html: str) -> BeautifulSoup:
    """Parse leniently, keeping `class` as the raw attribute string."""
    return BeautifulSoup(html or "", "html.parser", multi_valued_attributes=None)


def _class_attr(element: Tag) -> Optional[str]:
    """The raw class attribute, or None when the element has none."""
    classes = element.get("class")
    if classes is None:
        return None
    if isinstance(classes, str):
        return classes
    return " ".join(classes)


def _class_tokens(element: Tag) -> list:
    # Split on single spaces only; tabs and newlines stay inside a token
    return (_class_attr(element) or "").split(" ")


def clean_html(html: str) -> str:
    """Collapse markup onto one line with single spaces."""
    html = re.sub(r"(\r\n|\n|\r)", "", html)
    html = re.sub(r"\s+", " ", html)
    return html.strip()


def outer_html(element: Tag) -> str:
    return str(element)


def _has(element: Tag, selector: str) -> bool:
    return element.select_one(selector) is not None


def _count(element: Tag, selector: str) -> int:
    return len(element.select(selector))


# ---------------------------------------------------------------------------
# Buttons
# ---------------------------------------------------------------------------

def extract_button_style(element: Tag) -> str:
    """Map class names to one of default / secondary / outline / ghost."""
    styles = _class_tokens(element)

    if any(_PRIMARY.search(s) or _BG_PRIMARY.search(s) for s in styles):
        return "default"
    if any(_SECONDARY.search(s) or _BG_SECONDARY.search(s) for s in styles):
        return "secondary"
    if any(_OUTLINE.search(s) or ("border" in s and "bg-" not in s) for s in styles):
        return "outline"
    if any(_GHOST.search(s) or ("text-" in s and "bg-" not in s) for s in styles):
        return "ghost"

    # Unstyled buttons render as primary
    return "default"


def extract_button_size(element: Tag) -> str:
    """Map class names to one of sm / default / lg."""
    styles = _class_tokens(element)

    if any(_SIZE_SM.search(s) or "text-sm" in s or _PAD_SM.search(s) for s in styles):
        return "sm"
    if any(_SIZE_LG.search(s) or "text-lg" in s or _PAD_LG.search(s) for s in styles):
        return "lg"
    return "default"


def extract_button(element: Tag) -> ExtractedButton:
    return ExtractedButton(
        type="Custom",
        variant=extract_button_style(element),
        size=extract_button_size(element),
        text=element.get_text().strip() or "Button",
        code=clean_html(outer_html(element)),
        class_name=_class_attr(element),
    )


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

def determine_template_type(element: Tag) -> Optional[str]:
    """
    Classify a block by its shape. First match wins:

        Hero Section  heading h1/h2 + paragraph + action, more than 200 chars
        Feature Card  heading h3/h4 + paragraph, 100-500 chars
        Navigation    is or contains <nav>, more than 2 links
        Footer        is <footer>, or more than 3 links and a copyright notice
    """
    html = outer_html(element)

    if (
        _has(element, "h1, h2")
        and _has(element, "p")
        and _has(element, HERO_ACTION_SELECTOR)
        and len(html) > HERO_MIN_HTML
    ):
        return "Hero Section"

    if (
        _has(element, "h3, h4")
        and _has(element, "p")
        and CARD_MIN_HTML < len(html) < CARD_MAX_HTML
    ):
        return "Feature Card"

    if (element.name == "nav" or _has(element, "nav")) and _count(element, "a") > 2:
        return "Navigation"

    if element.name == "footer" or (
        _count(element, "a") > 3 and "copyright" in html.lower()
    ):
        return "Footer"

    return None


def extract_template(element: Tag) -> Optional[ExtractedTemplate]:
    html = outer_html(element)

    # Too small to be a layout block
    if len(html) < MIN_TEMPLATE_HTML:
        return None

    if not _has(element, SIGNIFICANT_SELECTOR):
        return None

    template_type = determine_template_type(element)
    if not template_type:
        return None

    cleaned = clean_html(html)
    return ExtractedTemplate(name=template_type, component=cleaned, code=cleaned)
