# file_utils.py
# Contains utility functions for extracting text from files.

import os

import docx
import pdfplumber

SUPPORTED_EXTENSIONS = (".txt", ".pdf", ".docx")


def extract_text_from_pdf(pdf_file_path):
    """Extracts the text of every page of a PDF, one page per block."""
    try:
        with pdfplumber.open(pdf_file_path) as pdf:
            pages = [page.extract_text() for page in pdf.pages]
    except Exception as e:
        print(f"[Error] Failed reading PDF: {pdf_file_path} -> {e}")
        return None
    # pages without a text layer come back as None
    return "".join(f"{page}\n" for page in pages if page)


def extract_text_from_docx(docx_file_path):
    """Extracts paragraph text from a DOCX file, one paragraph per line."""
    try:
        paragraphs = docx.Document(docx_file_path).paragraphs
    except Exception as e:
        print(f"[Error] Failed reading DOCX: {docx_file_path} -> {e}")
        return None
    return "".join(f"{para.text}\n" for para in paragraphs)


def extract_text_from_txt(txt_file_path):
    """Reads a UTF-8 text file."""
    try:
        with open(txt_file_path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"[Error] Failed reading text file: {txt_file_path} -> {e}")
        return None


def extract_text(file_path):
    """Extracts text from a .txt, .pdf or .docx file, picked by extension."""
    ext = os.path.splitext(file_path)[1].lower()
    if ext == ".pdf":
        return extract_text_from_pdf(file_path)
    if ext == ".docx":
        return extract_text_from_docx(file_path)
    if ext == ".txt":
        return extract_text_from_txt(file_path)
    raise ValueError(
        f"Unsupported file type {ext!r} (expected one of {', '.join(SUPPORTED_EXTENSIONS)})"
    )


def read_corpus(file_path):
    """Returns the non-blank lines of a document, or None if it can't be read."""
    text = extract_text(file_path)
    if text is None:
        return None
    return split_lines(text)


def split_lines(text):
    """Splits extracted text into its non-blank lines."""
    return [line for line in text.splitlines() if line.strip()]
