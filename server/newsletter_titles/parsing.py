import re
from typing import List

# "12. Title" or "12.Title"; ASCII digits only, at the very start of the line
NUMBERING_RE = re.compile(r"^[0-9]+\.\s*")


def parse_titles(raw_text: str) -> List[str]:
    """
    Turn the model's numbered list into plain titles.
    Blank lines are dropped, a leading "<digits>." prefix is stripped, order is kept.
    """
    return [
        NUMBERING_RE.sub("", line).strip()
        for line in raw_text.split("\n")
        if line.strip()
    ]
