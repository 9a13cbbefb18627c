import json
import subprocess
from pathlib import Path

from rustdrill.project import Crate, RustAnalyzerProject


class FakeRunner:
    def __init__(self, stdout):
        self.stdout = stdout
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append(list(args))
        return subprocess.CompletedProcess(args, 0, self.stdout, b"")


def test_add_path_only_rust_files():
    project = RustAnalyzerProject()
    project.add_path(Path("exercises/a.rs"))
    project.add_path(Path("exercises/README.md"))
    project.add_path(Path("exercises"))
    assert [c.root_module for c in project.crates] == [str(Path("exercises/a.rs"))]
    crate = project.crates[0]
    assert crate.edition == "2021"
    assert crate.cfg == ["test"]
    assert crate.deps == []


def test_exercises_to_json(tmp_path):
    root = tmp_path / "exercises"
    (root / "a" / "b").mkdir(parents=True)
    (root / "a" / "x.rs").write_text("")
    (root / "a" / "b" / "y.rs").write_text("")
    (root / "a" / "notes.md").write_text("")
    project = RustAnalyzerProject()
    project.exercises_to_json(root)
    assert [c.root_module for c in project.crates] == [
        str(root / "a" / "b" / "y.rs"),
        str(root / "a" / "x.rs"),
    ]


def test_exercises_to_json_empty(tmp_path):
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path / "missing")
    assert project.crates == []


def test_sysroot_from_env(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/src/rust")
    project = RustAnalyzerProject()
    assert project.get_sysroot_src() == "/src/rust"
    assert project.sysroot_src == "/src/rust"


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    runner = FakeRunner(b"/opt/toolchain extra\n")
    monkeypatch.setattr(subprocess, "run", runner)
    project = RustAnalyzerProject()
    project.get_sysroot_src()
    assert runner.calls == [["rustc", "--print", "sysroot"]]
    parts = Path(project.sysroot_src).parts
    assert parts[-5:] == ("lib", "rustlib", "src", "rust", "library")
    assert Path(*parts[:-5]) == Path("/opt/toolchain")
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out


def test_to_dict_shape():
    project = RustAnalyzerProject("/sys", [Crate("a.rs")])
    data = project.to_dict()
    assert list(data) == ["sysroot_src", "crates"]
    assert data["crates"][0]["root_module"] == "a.rs"
    assert list(data["crates"][0]) == ["root_module", "edition", "deps", "cfg"]


def test_write_to_disk_round_trip(tmp_path):
    project = RustAnalyzerProject("/sys", [Crate("a.rs"), Crate("b.rs")])
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    loaded = json.loads(target.read_text())
    assert loaded == project.to_dict()
    assert " " not in target.read_text()