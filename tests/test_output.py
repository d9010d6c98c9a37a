import io

from analysis.rates import RateTotals
from netspeed_cli.output import StatusWriter, encode, error_payload, sample_payload


def test_sample_fields_are_right_aligned_in_four_columns():
    payload = sample_payload(RateTotals(rx_rate=5, tx_rate=1_500_000))
    assert payload == {"text": "  5B  1.5M "}


def test_wide_values_are_not_cut():
    payload = sample_payload(RateTotals(rx_rate=123_456, tx_rate=0))
    assert payload["text"] == "123.5K    0B "


def test_error_payload_key_order():
    line = encode(error_payload("eth9", "Interface does not exist"))
    assert line == '{"text": "⚠ eth9", "tooltip": "Interface does not exist", "class": "error"}'


def test_error_text_is_json_escaped():
    line = encode(error_payload('a"b', "x"))
    assert '"⚠ a\\"b"' in line


def test_writer_emits_one_line_per_event():
    stream = io.StringIO()
    writer = StatusWriter(stream)
    writer.sample(RateTotals(1000, 2000))
    writer.error("Error", "Cannot open /proc/net/dev")
    lines = stream.getvalue().splitlines()
    assert lines == [
        '{"text": "1.0K  2.0K "}',
        '{"text": "⚠ Error", "tooltip": "Cannot open /proc/net/dev", "class": "error"}',
    ]
    assert stream.getvalue().endswith("\n")


class RecordingStream(io.StringIO):
    def __init__(self):
        super().__init__()
        self.flushed_at = []

    def flush(self):
        self.flushed_at.append(self.getvalue())
        super().flush()


def test_every_line_is_flushed_when_written():
    stream = RecordingStream()
    writer = StatusWriter(stream)
    writer.sample(RateTotals(0, 0))
    writer.error("Error", "Cannot open /proc/net/dev")
    assert len(stream.flushed_at) >= 2
    first = '{"text": "  0B    0B "}\n'
    assert first in stream.flushed_at
    assert stream.flushed_at[-1] == stream.getvalue()
    assert stream.flushed_at[-1].count("\n") == 2
