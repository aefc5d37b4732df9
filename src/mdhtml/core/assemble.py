"""Fixed HTML document shell around the produced fragments"""

from typing import Iterable


HEADER = (
    "<!DOCTYPE html>\n"
    "<html lang=\"en\">\n"
    "<head>\n"
    "    <meta charset=\"UTF-8\">\n"
    "    <title>Title</title>\n"
    "</head>\n"
    "<body>\n"
)
FOOTER = "</body>\n</html>\n"


def assemble_document(fragments: Iterable[str]) -> str:
    """Join fragments in order, one per line, between HEADER and FOOTER."""
    body = "".join(f"{fragment}\n" for fragment in fragments)
    return f"{HEADER}{body}{FOOTER}"
