import io
import os

import pytest

NL = os.linesep.encode()


@pytest.fixture
def run():
    """Call a command against in-memory byte streams."""

    def _run(func, args, stdin=b""):
        out, err = io.BytesIO(), io.BytesIO()
        code = func(args, io.BytesIO(stdin), out, err)
        return code, out.getvalue(), err.getvalue()

    return _run
