import datetime as dt
import io

from openpyxl import load_workbook

from settlements.model import sample_instructions
from settlements.processing import process
from settlements.reporting import COLUMNS, ExcelReportSink, TextReportSink, format_row

JAN_15 = dt.date(2018, 1, 15)
JUN_10 = dt.date(2018, 6, 10)
JUN_11 = dt.date(2018, 6, 11)
JUN_20 = dt.date(2018, 6, 20)


def _render(**kwargs):
    out = io.StringIO()
    TextReportSink(stream=out).write(process(sample_instructions()), **kwargs)
    return out.getvalue()


def test_format_row_right_aligns_to_column_widths():
    line = format_row(["Google", "1.11"], COLUMNS[:2])
    assert line == "    Google      1.11"


def test_text_report_rankings_and_rounding():
    text = _render()
    lines = text.splitlines()

    incoming = lines.index("INCOMING INSTRUCTIONS:")
    outgoing = lines.index("OUTGOING INSTRUCTIONS:")
    incoming_rows = [l for l in lines[incoming + 3 : outgoing] if l.strip()]
    assert [r.split()[0] for r in incoming_rows] == ["Verizon", "Lego"]

    yahoo = next(l for l in lines if l.strip().startswith("Yahoo"))
    assert yahoo.split() == [
        "Yahoo",
        "19.00",
        "AED",
        "2018-01-10",
        "2018-06-20",
        "2",
        "100",
        "3800.20",
    ]
    verizon = next(l for l in lines if l.strip().startswith("Verizon"))
    assert "2018-06-11" in verizon.split()


def test_text_report_totals_per_date():
    text = _render()
    assert "OUTGOING USD PER SETTLEMENT DATE:" in text
    after = text.split("OUTGOING USD PER SETTLEMENT DATE:")[1]
    rows = [l.split() for l in after.splitlines()[3:] if l.strip()]
    assert rows[:2] == [["2018-01-15", "2109.00"], ["2018-06-20", "3800.20"]]


def test_text_report_date_filters():
    text = _render(incoming_date=JUN_10, outgoing_date=JAN_15)
    assert "INCOMING INSTRUCTIONS ON 10/06/2018:" in text
    assert "OUTGOING INSTRUCTIONS ON 15/01/2018:" in text

    filtered_in = text.split("INCOMING INSTRUCTIONS ON 10/06/2018:")[1].split(
        "OUTGOING INSTRUCTIONS ON"
    )[0]
    assert "Lego" in filtered_in
    assert "Verizon" not in filtered_in

    filtered_out = text.split("OUTGOING INSTRUCTIONS ON 15/01/2018:")[1]
    entities = [l.split()[0] for l in filtered_out.splitlines()[3:] if l.strip()]
    assert entities == ["Asus", "Google"]


def test_excel_report_sheets(tmp_path):
    out = tmp_path / "nested" / "report.xlsx"
    path = ExcelReportSink(out_path=out).write(
        process(sample_instructions()), outgoing_date=JAN_15
    )
    assert path == out and out.exists()

    wb = load_workbook(out)
    assert wb.sheetnames == [
        "Incoming",
        "Outgoing",
        "Incoming by Date",
        "Outgoing by Date",
        "Outgoing 2018-01-15",
    ]

    ws = wb["Outgoing"]
    assert [c.value for c in ws[1]] == [name for name, _ in COLUMNS]
    assert [ws.cell(row=r, column=1).value for r in range(2, ws.max_row + 1)] == [
        "Yahoo",
        "Asus",
        "Google",
    ]
    assert ws.cell(row=2, column=8).value == 3800.2

    totals = wb["Incoming by Date"]
    rows = list(totals.iter_rows(min_row=2, values_only=True))
    assert [(r[0].date(), r[1]) for r in rows] == [(JUN_10, 135.0), (JUN_11, 300.0)]

    assert wb["Outgoing 2018-01-15"].max_row == 3
