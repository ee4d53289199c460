import os

import pytest

from repo_insight.results import DirectoryScanError, FailureKind
from repo_insight.scanner import scanner as sc


def _all_names(structure):
    names = set()
    for rel_dir, files in structure.items():
        names.update(part for part in rel_dir.split("/") if part)
        names.update(files)
    return names


def test_scan_without_content_lists_files_with_empty_records(sample_project):
    structure = sc.scan_project(sample_project)

    assert set(structure) == {"", "src", "src/lib"}
    assert structure[""] == {"package.json": {}, "notes.txt": {}}
    assert structure["src"] == {
        "test.js": {},
        "test.py": {},
        "test.tsx": {},
        "data.json": {},
        "readme.txt": {},
    }
    assert structure["src/lib"] == {"util.py": {}}


def test_scan_never_includes_excluded_names(sample_project):
    for read_files in (False, True):
        names = _all_names(sc.scan_project(sample_project, read_files=read_files))
        assert not names & {"node_modules", ".git", ".env", "package-lock.json", "ignored.js"}


def test_scan_with_content_inlines_allowed_extensions(sample_project):
    structure = sc.scan_project(sample_project, read_files=True)

    assert structure[""]["package.json"] == {"content": '{"name": "test"}'}
    assert structure["src"]["test.js"] == {"content": 'console.log("hello");'}
    assert structure["src"]["test.py"] == {"content": 'print("hello")'}
    assert structure["src"]["test.tsx"] == {"content": "export default function() {}"}
    assert structure["src"]["data.json"] == {"content": '{"test": true}'}
    assert structure["src/lib"]["util.py"] == {"content": "def util():\n    return 1\n"}


def test_bare_txt_entry_never_matches_a_real_extension(sample_project):
    # "txt" and "pdf" are configured without a dot; suffixes always have one
    structure = sc.scan_project(sample_project, read_files=True)
    assert structure[""]["notes.txt"] == {}
    assert structure["src"]["readme.txt"] == {}
    assert "txt" in sc.ALLOWED_EXTENSIONS and "pdf" in sc.ALLOWED_EXTENSIONS


def test_dotted_extensions_can_be_configured(sample_project):
    structure = sc.scan_project(sample_project, read_files=True, allowed_extensions={".txt"})
    assert structure[""]["notes.txt"] == {"content": "top level notes"}
    assert structure["src"]["test.py"] == {}


def test_content_is_kept_byte_for_byte(tmp_path):
    (tmp_path / "crlf.py").write_bytes(b"a = 1\r\nb = 2\r\n")
    (tmp_path / "uni.js").write_bytes("const s = 'héllo';".encode("utf-8"))

    structure = sc.scan_project(tmp_path, read_files=True)

    assert structure[""]["crlf.py"] == {"content": "a = 1\r\nb = 2\r\n"}
    assert structure[""]["uni.js"] == {"content": "const s = 'héllo';"}


def test_scenario_src_app_js(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "src" / "app.js").write_text("x=1;")
    (tmp_path / ".env").write_text("SECRET=1")
    (tmp_path / "node_modules" / "lib.js").write_text("module.exports = {}")

    assert sc.scan_project(tmp_path, read_files=True) == {
        "": {},
        "src": {"app.js": {"content": "x=1;"}},
    }


def test_empty_directories_get_their_own_key(tmp_path):
    (tmp_path / "a" / "b").mkdir(parents=True)
    assert sc.scan_project(tmp_path) == {"": {}, "a": {}, "a/b": {}}


def test_scan_is_idempotent(sample_project):
    first = sc.scan_project(sample_project, read_files=True)
    second = sc.scan_project(sample_project, read_files=True)
    assert first == second
    assert first is not second


def test_scan_accepts_str_path(sample_project):
    assert sc.scan_project(str(sample_project)) == sc.scan_project(sample_project)


def test_symlinked_excluded_directory_is_not_listed(tmp_path):
    shared = tmp_path / "shared_deps"
    shared.mkdir()
    (shared / "lib.js").write_text("module.exports = {}")
    project = tmp_path / "project"
    project.mkdir()
    (project / "app.js").write_text("x=1;")
    os.symlink(shared, project / "node_modules", target_is_directory=True)

    structure = sc.scan_project(project, read_files=True)

    assert structure == {"": {"app.js": {"content": "x=1;"}}}


def test_symlinked_directory_is_not_descended(tmp_path):
    (tmp_path / "real").mkdir()
    (tmp_path / "real" / "inner.py").write_text("x")
    os.symlink(tmp_path / "real", tmp_path / "alias", target_is_directory=True)

    structure = sc.scan_project(tmp_path)

    assert set(structure) == {"", "real"}
    assert structure[""] == {"alias": {}}


def test_root_named_node_modules_yields_empty_map(tmp_path):
    nm = tmp_path / "node_modules"
    nm.mkdir()
    (nm / "x.js").write_text("x")
    assert sc.scan_project(nm) == {}


def test_missing_root_raises_directory_scan_error(tmp_path):
    with pytest.raises(DirectoryScanError) as exc_info:
        sc.scan_project(tmp_path / "missing")
    assert exc_info.value.failure.kind is FailureKind.DIRECTORY_LISTING
    assert isinstance(exc_info.value, OSError)
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_root_that_is_a_file_raises(tmp_path):
    f = tmp_path / "file.py"
    f.write_text("x")
    with pytest.raises(DirectoryScanError):
        sc.scan_project(f)


def test_file_read_failure_becomes_error_record(sample_project, monkeypatch):
    real_read = sc._read_text

    def flaky_read(path):
        if os.path.basename(path) == "test.py":
            raise PermissionError(13, "Permission denied")
        return real_read(path)

    monkeypatch.setattr(sc, "_read_text", flaky_read)
    structure = sc.scan_project(sample_project, read_files=True)

    record = structure["src"]["test.py"]
    assert set(record) == {"error"}
    assert record["error"].startswith("Error reading file: ")
    assert "Permission denied" in record["error"]
    # the rest of the scan is unaffected
    assert structure["src"]["test.js"] == {"content": 'console.log("hello");'}


def test_records_never_mix_content_and_error(sample_project):
    structure = sc.scan_project(sample_project, read_files=True)
    for files in structure.values():
        for record in files.values():
            assert not ("content" in record and "error" in record)


def test_read_selected_file_returns_exact_text(sample_project):
    outcome = sc.read_selected_file(sample_project / "src" / "test.js")
    assert outcome.ok
    assert outcome.value == 'console.log("hello");'
    assert outcome.text == 'console.log("hello");'


def test_read_selected_file_rejects_extension(sample_project):
    outcome = sc.read_selected_file(sample_project / "src" / "readme.txt")
    assert not outcome.ok
    assert outcome.failure.kind is FailureKind.EXTENSION_NOT_ALLOWED
    assert outcome.text == "File extension '.txt' not allowed."


def test_read_selected_file_rejects_empty_extension(tmp_path):
    (tmp_path / "Makefile").write_text("all:")
    outcome = sc.read_selected_file(tmp_path / "Makefile")
    assert outcome.text == "File extension '' not allowed."
    assert sc.read_selected_file(tmp_path / "pdf").failure.kind is FailureKind.EXTENSION_NOT_ALLOWED


def test_read_selected_file_missing_file(tmp_path):
    outcome = sc.read_selected_file(tmp_path / "nope.py")
    assert outcome.failure.kind is FailureKind.FILE_READ
    assert "Error reading file" in outcome.text
