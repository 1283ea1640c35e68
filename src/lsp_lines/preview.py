"""Plain-text view of a buffer with its installed virtual lines"""

from .host import DocumentHost


def preview(host: DocumentHost, owner: int, buffer: int) -> str:
    document = host.documents[buffer]
    annotations = host.annotations(owner, buffer)

    output = []
    for line, text in enumerate(document.lines):
        output.append(text.rstrip("\r\n"))
        for virt_line in annotations.get(line, []):
            output.append("".join(span_text for span_text, _ in virt_line))

    return "\n".join(output)
