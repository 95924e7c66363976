"""Testing code to use for all intonation tests."""
import json
import os

if os.environ.get("TYPEGUARD"):
    # Use typeguard to check types at runtime
    #   The lark parser is built at import time, so import it before
    #   installing the typeguard import hook.
    from typeguard import install_import_hook

    from lark import Lark, Token, Transformer  # noqa: F401

    install_import_hook("intonation")

import pytest


@pytest.fixture(
    params=[
        {},
        {"width": "i64"},
        {"width": 64, "precision": 1},
        {"limits": [1, 3, 5, 7, 9, 11]},
        {"limits": "1,5,3"},
        {"ratios": ["3/2", "5/4", "7/4"], "bounds": ["len:12", "range:-2,3"]},
        {"ratios": "3/2 5/4", "bounds": "inf len:-2"},
        {"verbose": True},
    ]
)
def config_file(tmp_path, request):
    """JSON config file for the command line interface."""
    config_file_path = tmp_path / "config.json"
    config_file_path.write_text(json.dumps(request.param))
    return config_file_path
