"""
Section Extractor

Pulls the part of a markdown document that covers one topic.

Lines are tokenized into (heading level, text) records; the section starts
at the first line mentioning the topic and runs up to the next level-2
heading that does not mention it. Fenced code blocks are not treated
specially, so a "## " line inside a fence still counts as a heading.
"""

import re
from dataclasses import dataclass

HEADING_PATTERN = re.compile(r"^(#{1,6}) ")
SECTION_LEVEL = 2


@dataclass(frozen=True)
class Line:
    """One tokenized line. level is 0 for non-heading lines."""
    index: int
    level: int
    text: str

    @property
    def is_heading(self) -> bool:
        return self.level > 0


def tokenize(content: str) -> list[Line]:
    tokens = []
    for index, text in enumerate(content.split("\n")):
        match = HEADING_PATTERN.match(text)
        tokens.append(Line(index=index, level=len(match.group(1)) if match else 0, text=text))
    return tokens


def topic_variants(topic: str) -> tuple[str, ...]:
    """The topic key as written, and with hyphens read as spaces."""
    key = topic.lower()
    spaced = key.replace("-", " ")
    return (key,) if spaced == key else (key, spaced)


def mentions_topic(text: str, topic: str) -> bool:
    lowered = text.lower()
    return any(variant in lowered for variant in topic_variants(topic))


def find_section(content: str, topic: str) -> tuple[int, int] | None:
    """
    Locate the line span [start, end) covering a topic.

    Returns None when no line mentions the topic.
    """
    lines = tokenize(content)

    start = next((line.index for line in lines if mentions_topic(line.text, topic)), None)
    if start is None:
        return None

    end = len(lines)
    for line in lines[start + 1:]:
        if line.level == SECTION_LEVEL and not mentions_topic(line.text, topic):
            end = line.index
            break

    return start, end


def extract_section(content: str, topic: str) -> str:
    """
    Return the section of content about topic, or content unchanged if
    no line mentions it.
    """
    span = find_section(content, topic)
    if span is None:
        return content

    start, end = span
    return "\n".join(content.split("\n")[start:end])
