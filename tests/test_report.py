from conftest import query_json

from deepsec_render import TraceLevel, query_from_json
from deepsec_render.query import render_processes
from deepsec_render.report import render_report


def test_report_with_attack() -> None:
    report = render_report(query_from_json(query_json()))
    assert report.startswith("Trace equivalence (private semantics)\n")
    assert "Status: completed\n" in report
    assert "Duration: 12.0s\n" in report
    assert "Not trace equivalent\n" in report
    assert "Process 1:\nnew k;\nout(c,senc(k,k))\n" in report
    assert "Process 2:\nnew k_1;\n" in report
    assert "Attack trace on process 1 (io):\n" in report
    assert "  out(c(),ax_1);\n  in(c(),senc(ax_1,#n));\n" in report
    assert "\u200b" not in report


def test_report_levels() -> None:
    report = render_report(query_from_json(query_json()), TraceLevel.ALL)
    assert "(all):" in report
    assert "  tau;\n" in report


def test_report_without_attack() -> None:
    report = render_report(query_from_json(query_json(with_attack=False)))
    assert "Trace equivalent\nThe processes are trace equivalent." in report
    assert "Attack trace" not in report


def test_report_error_message() -> None:
    data = query_json(with_attack=False)
    data["status"] = "internal_error"
    data["error_msg"] = "Out of memory"
    report = render_report(query_from_json(data))
    assert "Status: stopped by internal error\n" in report
    assert "Error: Out of memory\n" in report
    assert "Trace equivalent" not in report.split("\n", 1)[1]


def test_listings_do_not_depend_on_trace() -> None:
    data = query_json()
    # The trace mentions both `k` names, the second process's one first
    data["attack_trace"]["action_sequence"].insert(
        0,
        {
            "type": "input",
            "channel": {"type": "Attacker", "label": "#c"},
            "term": {
                "type": "Function",
                "symbol": 0,
                "args": [{"type": "Atomic", "id": 4}, {"type": "Atomic", "id": 3}],
            },
        },
    )
    report = render_report(query_from_json(data))
    p1, p2 = render_processes(query_from_json(data))
    assert p1 == "new k;\nout(c,senc(k,k))\n"
    assert f"Process 1:\n{p1}" in report
    assert f"Process 2:\n{p2}" in report
    assert "  in(#c,senc(k_1,k));\n" in report
