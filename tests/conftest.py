import pytest

from password_strength import PasswordStrength


@pytest.fixture
def checker() -> PasswordStrength:
    return PasswordStrength()


@pytest.fixture
def presets_file(tmp_path):
    fn = tmp_path / "presets.yaml"
    fn.write_text(
        """\
relaxed:
  minLength: 5
  minUpper: 0
  minLower: 1
  minNumeric: 0
  minSpecial: 0
  checkUsername: false
  checkEmail: true
bounded:
  minLength: 8
  maxLength: 16
  minUpper: 1
  minLower: 1
  minNumeric: 1
  minSpecial: 1
  checkUsername: true
  checkEmail: true
"""
    )
    return fn
