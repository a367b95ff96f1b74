"""Pydantic schemas for scanner output.

These are transient artifacts of a single scan: code matches, section
matches, and topic page ranges.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SectionType(str, Enum):
    """The three framework sections a standard page carries."""

    PRACTICE = "practice"
    IDEA = "idea"
    CONCEPT = "concept"

    def __str__(self) -> str:
        return self.value


class DuplicatePolicy(str, Enum):
    """What discover_codes() does when a code appears more than once.

    - FIRST_WINS: keep the first occurrence (document order)
    - LAST_WINS: keep the last occurrence, at the position of the first
    - KEEP_ALL: keep every occurrence
    """

    FIRST_WINS = "first_wins"
    LAST_WINS = "last_wins"
    KEEP_ALL = "keep_all"


class CodeMatch(BaseModel):
    """A standard code found on a page.

    Attributes:
        code: The code token, e.g. "MS-PS1-1"
        page: Page number the code was found on
        context: Up to 50 characters either side of the match
    """

    model_config = ConfigDict(frozen=True)

    code: str
    page: int
    context: str = ""


class SectionMatch(BaseModel):
    """Raw text of one framework section on a page.

    The content starts right after the section header and stops at the next
    reserved header or the end of the page.
    """

    model_config = ConfigDict(frozen=True)

    section_type: SectionType
    page: int
    content: str


class TopicRange(BaseModel):
    """A topic and the pages and codes it spans."""

    model_config = ConfigDict(frozen=True)

    topic: str
    start_page: int
    end_page: int
    standard_codes: list[str] = Field(default_factory=list)
