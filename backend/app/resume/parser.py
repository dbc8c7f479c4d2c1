from pypdf import PdfReader
from docx import Document
from io import BytesIO

TEXT_SUFFIXES = (".txt", ".md")
TEXT_MIME_TYPES = {"text/plain", "text/markdown"}
PDF_MIME_TYPES = {"application/pdf", "application/x-pdf"}


def parse_pdf(file_bytes: bytes) -> str:
    reader = PdfReader(BytesIO(file_bytes))
    text = []
    for page in reader.pages:
        t = page.extract_text()
        if t:
            text.append(t)
    return "\n".join(text)

def parse_docx(file_bytes: bytes) -> str:
    doc = Document(BytesIO(file_bytes))
    return "\n".join([p.text for p in doc.paragraphs])

def parse_text(file_bytes: bytes) -> str:
    return file_bytes.decode("utf-8", errors="replace")

def parse_resume(filename: str, file_bytes: bytes, content_type: str | None = None) -> str:
    name = str(filename or "").lower().strip()
    mime = str(content_type or "").lower().strip()

    if name.endswith(TEXT_SUFFIXES) or mime in TEXT_MIME_TYPES:
        text = parse_text(file_bytes)
    elif name.endswith(".pdf") or mime in PDF_MIME_TYPES:
        try:
            text = parse_pdf(file_bytes)
        except Exception as exc:
            raise ValueError(f"Unable to parse PDF resume: {exc}") from exc
    elif name.endswith(".docx"):
        text = parse_docx(file_bytes)
    else:
        raise ValueError("Unsupported file type. Please upload a .pdf, .docx or .txt resume.")

    if not text.strip():
        raise ValueError("That file appears to be empty")
    return text
