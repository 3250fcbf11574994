"""Shared fixtures."""

import pytest

from dnpgen.models import RuleSet


SAMPLE_LINES = [
    "NODE=NODE01",
    "NOTES=random text",
    "SIG=@GV.FT041_H_H TYPE=AA DESC=flow",
    "  SIG=@GV.LIT100_H_H TYPE=AA",
    "SIG=@GV.VALVE1_CMD TYPE=LA",
    "SIG=@GV.VALVE1_OPEN TYPE=BOOL",
    "SIG=@GV.PUMP2 TYPE=AO",
    "SIG=@GV.HORN1 TYPE=DO",
    "SIG=@GV.TT305_SP TYPE=REAL",
    "SIG=@GV.TT305_SPAN TYPE=REAL",
    "SIG=@GV.COUNTER1 TYPE=DINT",
    "SIG=@XX.BROKEN TYPE=AA",
]


@pytest.fixture
def rules():
    """Rule set with the usual high-high literal, setpoint and command patterns."""
    return RuleSet.from_patterns(
        analog_output_regex=["LIT.*_H_H", "_SP($|_)"],
        digital_output_regex=["_CMD", "_RST"],
        spare_ai="SPARE_AI",
        spare_ao="SPARE_AO",
        spare_di="SPARE_DI",
        spare_do="SPARE_DO",
    )


@pytest.fixture
def sig_file(tmp_path):
    """Signal file containing SAMPLE_LINES."""
    path = tmp_path / "NODE01.SIG"
    path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="latin-1")
    return path


CONFIG_YAML = """\
app:
  sigext_path: ""
  sigext_flags: ""
  classification:
    analog_output_regex:
      - "LIT.*_H_H"
      - "_SP($|_)"
    digital_output_regex:
      - "_CMD"
      - "_RST"
  spares:
    do: "SPARE_DO"
    di: "SPARE_DI"
    ao: "SPARE_AO"
    ai: "SPARE_AI"
"""


@pytest.fixture
def config_file(tmp_path):
    """Valid configuration file."""
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML, encoding="utf-8")
    return path
