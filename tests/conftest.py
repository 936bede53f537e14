import io

import docx
import openpyxl
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Single-page PDF with a known metric sentence."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Revenue grew 15% in Q3")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def blank_pdf_bytes() -> bytes:
    """Valid PDF without a text layer."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def xlsx_bytes() -> bytes:
    """Workbook whose first sheet holds a header and two rows; a second sheet is ignored."""
    workbook = openpyxl.Workbook()
    first = workbook.active
    first.title = "Revenue"
    first.append(["month", "amount"])
    first.append(["Jan", 1200])
    first.append(["Feb", None])
    second = workbook.create_sheet("Notes")
    second.append(["ignored"])
    second.append(["should not appear"])
    buf = io.BytesIO()
    workbook.save(buf)
    return buf.getvalue()


@pytest.fixture()
def docx_bytes() -> bytes:
    document = docx.Document()
    document.add_paragraph("Quarterly summary")
    document.add_paragraph("")
    document.add_paragraph("Churn fell to 3% on 2024-01-31")
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def empty_docx_bytes() -> bytes:
    buf = io.BytesIO()
    docx.Document().save(buf)
    return buf.getvalue()
