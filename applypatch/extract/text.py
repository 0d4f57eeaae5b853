import re

from .markers import BEGIN_PATCH_MARKER, END_PATCH_MARKER


def extract_patch_from_text(text: str) -> str:
    """
    Pull a patch envelope out of surrounding chatter.

    Drops <think> blocks and a markdown fence wrapping the whole payload, then
    returns the slice from the first begin marker to the last end marker. If no
    begin marker is present the cleaned text is returned as-is, so that
    parse_patch reports the envelope problem.
    """
    if not text:
        return ""

    text = re.sub(r"<think>.*?</think>", "", text, flags=re.DOTALL)

    fence_match = re.match(
        r"^\s*```[a-zA-Z0-9-]*[ \t]*\n(.*?)\n\s*```\s*$", text, flags=re.DOTALL
    )
    if fence_match:
        text = fence_match.group(1)

    lines = text.strip().split("\n")
    begin = next(
        (i for i, ln in enumerate(lines) if ln.strip() == BEGIN_PATCH_MARKER), None
    )
    if begin is None:
        return text.strip()

    end = None
    for i in range(len(lines) - 1, begin, -1):
        if lines[i].strip() == END_PATCH_MARKER:
            end = i
            break
    if end is None:
        return "\n".join(lines[begin:])

    body = lines[begin + 1:end]
    return "\n".join([BEGIN_PATCH_MARKER, *body, END_PATCH_MARKER])
