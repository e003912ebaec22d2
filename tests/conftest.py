import pytest

import tpcompress as tpc

# sorted order gives: a=0 ala=1 ijo=2 jan=3 li=4 mi=5 moku=6 pona=7 sina=8 toki=9
WORDS = ["toki", "pona", "mi", "li", "sina", "moku", "jan", "ijo", "ala", "a"]


@pytest.fixture
def words() -> list[str]:
    return list(WORDS)


@pytest.fixture
def table(words) -> tpc.CodeTable:
    """Return a code table built from a small toki pona vocabulary."""
    return tpc.build_code_table(words)


@pytest.fixture
def stream():
    """Return a builder for streams carrying the current header."""

    def _stream(*codes: int | bytes) -> bytes:
        body = bytearray()
        for c in codes:
            if isinstance(c, bytes):
                body.extend(c)
            else:
                body.append(c)
        return tpc.write_header() + bytes(body)

    return _stream
