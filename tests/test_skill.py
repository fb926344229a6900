"""Tests for the skill-file scaffolder."""

from pathlib import Path
from unittest.mock import patch

from pipedrive_toolkit.core.skill import (
    SKILL_TEMPLATE,
    ScaffoldResult,
    default_skill_dir,
    setup_skill_template,
)


def test_default_skill_dir(isolated_home):
    """Test the skill lives under <base_dir>/skills/pipedrive."""
    assert default_skill_dir() == isolated_home / "skills" / "pipedrive"


def test_creates_skill_file_in_empty_dir(tmp_path):
    """Test the template is written verbatim when no skill file exists."""
    skill_dir = tmp_path / "skills" / "pipedrive"

    result = setup_skill_template(skill_dir)

    assert result == ScaffoldResult.CREATED
    assert (skill_dir / "SKILL.md").read_text(encoding="utf-8") == SKILL_TEMPLATE
    assert not (skill_dir / "SKILL.md.latest").exists()


def test_uses_default_dir(isolated_home):
    """Test the default location is used when none is given."""
    result = setup_skill_template()

    assert result == ScaffoldResult.CREATED
    assert (isolated_home / "skills" / "pipedrive" / "SKILL.md").exists()


def test_unchanged_file_performs_no_writes(tmp_path):
    """Test re-running with an identical file writes nothing."""
    setup_skill_template(tmp_path)

    with patch.object(Path, "write_bytes") as mock_write:
        result = setup_skill_template(tmp_path)

    assert result == ScaffoldResult.UNCHANGED
    mock_write.assert_not_called()
    assert not (tmp_path / "SKILL.md.latest").exists()


def test_new_template_written_to_latest(tmp_path):
    """Test a changed template lands in .latest and the original is untouched."""
    setup_skill_template(tmp_path, template="old template\n")
    original_bytes = (tmp_path / "SKILL.md").read_bytes()

    result = setup_skill_template(tmp_path, template="new template\n")

    assert result == ScaffoldResult.LATEST_WRITTEN
    assert (tmp_path / "SKILL.md").read_bytes() == original_bytes
    assert (tmp_path / "SKILL.md.latest").read_text(encoding="utf-8") == "new template\n"


def test_customized_file_is_never_modified(tmp_path):
    """Test user edits survive and the latest file is overwritten each run."""
    (tmp_path / "SKILL.md").write_text("# Our workflows\n", encoding="utf-8")
    (tmp_path / "SKILL.md.latest").write_text("stale", encoding="utf-8")

    result = setup_skill_template(tmp_path)

    assert result == ScaffoldResult.LATEST_WRITTEN
    assert (tmp_path / "SKILL.md").read_text(encoding="utf-8") == "# Our workflows\n"
    assert (tmp_path / "SKILL.md.latest").read_text(encoding="utf-8") == SKILL_TEMPLATE


def test_non_utf8_skill_file_is_kept(tmp_path):
    """Test a skill file saved in another encoding is left alone."""
    (tmp_path / "SKILL.md").write_bytes(b"caf\xe9 workflows\n")

    result = setup_skill_template(tmp_path)

    assert result == ScaffoldResult.LATEST_WRITTEN
    assert (tmp_path / "SKILL.md").read_bytes() == b"caf\xe9 workflows\n"
    assert (tmp_path / "SKILL.md.latest").read_bytes() == SKILL_TEMPLATE.encode("utf-8")


def test_line_ending_difference_writes_latest(tmp_path):
    """Test the comparison is byte for byte, including line endings."""
    crlf = SKILL_TEMPLATE.replace("\n", "\r\n").encode("utf-8")
    (tmp_path / "SKILL.md").write_bytes(crlf)

    result = setup_skill_template(tmp_path)

    assert result == ScaffoldResult.LATEST_WRITTEN
    assert (tmp_path / "SKILL.md").read_bytes() == crlf
    assert b"\r\n" not in (tmp_path / "SKILL.md.latest").read_bytes()


def test_created_file_keeps_unix_line_endings(tmp_path):
    """Test the template is written without newline translation."""
    setup_skill_template(tmp_path)

    assert (tmp_path / "SKILL.md").read_bytes() == SKILL_TEMPLATE.encode("utf-8")


def test_filesystem_error_is_logged_not_raised(tmp_path, caplog):
    """Test filesystem failures are reported as warnings."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    result = setup_skill_template(blocker / "skills")

    assert result == ScaffoldResult.FAILED
    assert "Could not set up skill template" in caplog.text


def test_template_mentions_registered_tools():
    """Test the template references real tool names."""
    assert "pipedrive_list_stages" in SKILL_TEMPLATE
    assert "pipedrive_create_deal" in SKILL_TEMPLATE


def test_unencodable_template_is_logged_not_raised(tmp_path, caplog):
    """Test encoding failures are reported like filesystem failures."""
    result = setup_skill_template(tmp_path, template="bad \ud800 text\n")

    assert result == ScaffoldResult.FAILED
    assert "Could not set up skill template" in caplog.text
    assert not (tmp_path / "SKILL.md").exists()
