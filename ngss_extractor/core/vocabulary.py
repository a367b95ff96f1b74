"""Canonical vocabularies for middle-school science standards.

Used to canonicalize topic keys and to audit extracted practice and concept
names for OCR damage. Values are the clean forms found in the source
document.
"""

from typing import Final

PRACTICE_VALUES: Final[tuple[str, ...]] = (
    "Analyze and interpret data to determine similarities and differences in findings.",
    "Analyze and interpret data to provide evidence for phenomena.",
    "Analyze displays of data to identify linear and nonlinear relationships.",
    "Ask questions that can be investigated within the scope of the classroom, outdoor "
    "environment, and museums and other public facilities with available resources and, "
    "when appropriate, frame a hypothesis based on observations and scientific principles.",
    "Ask questions to identify and clarify evidence of an argument.",
    "Construct an explanation that includes qualitative or quantitative relationships "
    "between variables that predict phenomena.",
    "Develop a model to describe unobservable mechanisms.",
    "Develop a model to predict and/or describe phenomena.",
    "Develop and use a model to describe phenomena.",
    "Unknown",
)
"""Science and engineering practice names (10 values, "Unknown" included)."""

CONCEPT_VALUES: Final[tuple[str, ...]] = (
    "Cause and effect relationships may be used to predict phenomena in natural or designed systems.",
    "Cause and effect relationships may be used to predict phenomena in natural systems.",
    "Graphs and charts can be used to identify patterns in data.",
    "Graphs, charts, and images can be used to identify patterns in data.",
    "Macroscopic patterns are related to the nature of microscopic and atomic-level structure.",
    "Patterns can be used to identify cause and effect relationships.",
    "Patterns in rates of change and other numerical relationships can provide information "
    "about natural systems.",
    "Proportional relationships (e.g., speed as the ratio of distance traveled to time taken) "
    "among different types of quantities provide information about the magnitude of "
    "properties and processes.",
)
"""Crosscutting concept names (8 values)."""

IDEA_VALUES: Final[tuple[str, ...]] = (
    "Adaptation",
    "Biodiversity and Humans",
    "Biogeology",
    "Chemical Reactions",
    "Conservation of Energy and Energy Transfer",
    "Cycles of Matter and Energy Transfer in Ecosystems",
    "Definitions of Energy",
    "Earth and the Solar System",
    "Earth Materials and Systems",
    "Ecosystem Dynamics, Functioning, and Resilience",
    "Electromagnetic Radiation",
    "Evidence of Common Ancestry and Diversity",
    "Forces and Motion",
    "Global Climate Change",
    "Growth and Development of Organisms",
    "Human Impacts on Earth Systems",
    "Information Processing",
    "Information Technologies and Instrumentation",
    "Inheritance of Traits",
    "Interdependent Relationships in Ecosystems",
    "Natural Hazards",
    "Natural Resources",
    "Natural Selection",
    "Organization for Matter and Energy Flow in Organisms",
    "Plate Tectonics and Large-Scale System Interactions",
    "Relationship Between Energy and Forces",
    "Structure and Function",
    "Structure and Properties of Matter",
    "The History of Planet Earth",
    "The Roles of Water in Earth's Surface Processes",
    "The Universe and Its Stars",
    "Types of Interactions",
    "Variation of Traits",
    "Wave Properties",
    "Weather and Climate",
)
"""Disciplinary core idea names."""

TOPIC_VALUES: Final[tuple[str, ...]] = (
    "Structure and Properties of Matter",
    "Chemical Reactions",
    "Forces and Interactions",
    "Energy",
    "Waves and Electromagnetic Radiation",
    "Structure, Function, and Information Processing",
    "Matter and Energy in Organisms and Ecosystems",
    "Interdependent Relationships in Ecosystems",
    "Growth, Development, and Reproduction of Organisms",
    "Natural Selection and Adaptations",
    "Space Systems",
    "History of Earth",
    "Earth's Systems",
    "Weather and Climate",
    "Human Impacts",
    "Engineering Design",
)
"""Middle-school topic headings, in document order."""


def squash(value: str) -> str:
    """Lowercase and drop all whitespace. OCR split words compare equal."""
    return "".join(value.lower().split())
