"""Record structurer - turn one standard code into a StandardRecord.

Locates the code's page, then parses:
- grade level and domain from the code itself
- the performance statement following the code
- practice / core idea / concept sections, falling back to documented
  defaults when a section or its detail line is missing
- the topic from the page header

Two fields are synthesized rather than extracted: questions and keywords.

structure_standard() is a pure function of (text, code).
"""

import logging
import re
from collections.abc import Sequence

from ngss_extractor.core.config import (
    DEFAULT_GRADE_LEVEL,
    DOMAIN_NAMES,
    UNKNOWN_DOMAIN,
    DimensionCodes,
    RecordLimits,
    RegexPatterns,
)
from ngss_extractor.core.pages import PageText, ensure_pages
from ngss_extractor.core.scanner import discover_codes, find_section, reserved_header_pattern
from ngss_extractor.core.topics import read_topic_header
from ngss_extractor.pydantic_models.scan_models import SectionType
from ngss_extractor.pydantic_models.standard_models import (
    Dimension,
    DimensionOrigin,
    LessonScopeHints,
    StandardRecord,
)

logger = logging.getLogger(__name__)


def collapse(text: str) -> str:
    """Collapse internal whitespace to single spaces and trim."""
    return " ".join(text.split())


def _describe(section_text: str) -> str:
    return collapse(section_text[:RecordLimits.DESCRIPTION_CHARS])


def default_dimension(description: str = "") -> Dimension:
    """The documented default for a dimension.

    Empty code, placeholder name, and either an empty description (section
    absent) or the section text (detail line not recognised).
    """
    return Dimension(
        code=DimensionCodes.PLACEHOLDER,
        name=RecordLimits.PLACEHOLDER_NAME,
        description=_describe(description) if description else "",
        origin=DimensionOrigin.DEFAULTED,
    )


# =============================================================================
# Code-derived fields
# =============================================================================

def split_code(code: str) -> tuple[str, str]:
    """Split "MS-PS1-1" into grade level "MS" and domain name."""
    grade, _, rest = code.partition("-")
    prefix = re.sub(r"\d+$", "", rest.split("-")[0])
    domain = DOMAIN_NAMES.get(prefix, UNKNOWN_DOMAIN)
    return grade or DEFAULT_GRADE_LEVEL, domain


def parse_performance_statement(content: str, code: str) -> str:
    """Text right after the code, up to the next "[" or section header."""
    m = re.search(re.escape(code) + r"\.?\s+", content)
    if not m:
        return ""
    rest = content[m.end():]
    end = len(rest)
    bracket = rest.find("[")
    if bracket != -1:
        end = bracket
    header = reserved_header_pattern().search(rest[:end])
    if header:
        end = header.start()
    return collapse(rest[:end])


# =============================================================================
# Dimension parsers
# =============================================================================

def parse_practice(section_text: str | None) -> Dimension:
    if section_text is None:
        return default_dimension()

    m = re.search(RegexPatterns.PRACTICE_DETAIL, section_text)
    if not m:
        return default_dimension(section_text)

    name = m.group(1)
    sentence = re.search(RegexPatterns.SENTENCE_END, name)
    if sentence:
        name = name[:sentence.end()]
    name = collapse(name)
    if not name:
        return default_dimension(section_text)

    return Dimension(
        code=DimensionCodes.PRACTICE,
        name=name,
        description=_describe(section_text),
    )


def parse_idea(section_text: str | None) -> Dimension:
    if section_text is None:
        return default_dimension()

    m = re.search(RegexPatterns.IDEA_DETAIL, section_text)
    if not m:
        return default_dimension(section_text)

    name = collapse(m.group(2)).rstrip(" .")
    return Dimension(
        code=m.group(1),
        name=name,
        description=_describe(section_text),
    )


def parse_concept(section_text: str | None) -> Dimension:
    if section_text is None:
        return default_dimension()

    m = re.search(RegexPatterns.CONCEPT_DETAIL, section_text)
    if not m:
        return default_dimension(section_text)

    return Dimension(
        code=DimensionCodes.CONCEPT,
        name=collapse(m.group(1)),
        description=_describe(section_text),
    )


DIMENSION_PARSERS = {
    SectionType.PRACTICE: parse_practice,
    SectionType.IDEA: parse_idea,
    SectionType.CONCEPT: parse_concept,
}


# =============================================================================
# Synthesized fields
# =============================================================================

def synthesize_questions(statement: str, topic: str) -> list[str]:
    """Generate up to two guiding questions from the statement and topic."""
    questions: list[str] = []

    if "?" in statement:
        lead = statement.split("?")[0].strip()
        if lead:
            questions.append(lead + "?")

    if len(topic) > 3 and "Unknown" not in topic:
        if topic.endswith(RecordLimits.DANGLING_SUFFIXES):
            questions.append(f"What is {topic.lower()} about?")
        else:
            questions.append(f"What do we know about {topic.lower()}?")

    if not questions and statement:
        m = re.match(r"^(\w+)\s+(.{20,60})", statement)
        if m:
            verb, obj = m.group(1).lower(), m.group(2)
            if verb in RecordLimits.HOW_VERBS:
                questions.append(f"How can we {verb} {obj}?")
            elif verb in RecordLimits.WHAT_VERBS:
                questions.append(f"What {obj}?")

    return questions[:RecordLimits.MAX_QUESTIONS]


def extract_keywords(statement: str, topic: str) -> list[str]:
    """Lower-cased content words of statement and topic, first-seen order."""
    keywords: list[str] = []
    for word in re.split(r"\W+", f"{statement} {topic}".lower()):
        if len(word) < RecordLimits.MIN_KEYWORD_LENGTH or word in RecordLimits.STOP_WORDS:
            continue
        if word not in keywords:
            keywords.append(word)
        if len(keywords) == RecordLimits.MAX_KEYWORDS:
            break
    return keywords


# =============================================================================
# Entry point
# =============================================================================

def structure_standard(
    source: "str | Sequence[PageText]",
    code: str,
) -> StandardRecord | None:
    """Build the structured record for one standard code.

    Args:
        source: Page-marker blob or segmented pages.
        code: Standard code, e.g. "MS-PS1-1".

    Returns:
        The record, or None if the code appears on no page. Missing or
        malformed sections never raise; they yield default dimensions.
    """
    pages = ensure_pages(source)
    located = next((c for c in discover_codes(pages) if c.code == code), None)
    if located is None:
        logger.debug(f"Code {code} not found on any page")
        return None

    page = next(p for p in pages if p.number == located.page and code in p.text)
    content = page.text

    grade_level, domain = split_code(code)
    statement = parse_performance_statement(content, code)
    topic = read_topic_header(content)

    dimensions = {}
    for kind, parser in DIMENSION_PARSERS.items():
        sections = find_section((page,), kind)
        dimensions[kind.value] = parser(sections[0].content if sections else None)

    keywords = extract_keywords(statement, topic)
    record = StandardRecord(
        code=code,
        grade_level=grade_level,
        domain=domain,
        topic=topic,
        performance_statement=statement,
        synthesized_questions=synthesize_questions(statement, topic),
        keywords=keywords,
        lesson_scope_hints=LessonScopeHints(key_concepts=extract_keywords(statement, "")),
        source_page=page.number,
        **dimensions,
    )

    if record.defaulted_dimensions:
        logger.debug(f"{code}: defaulted {', '.join(record.defaulted_dimensions)}")
    return record
