"""Tests for directory information gathering."""

import json
from pathlib import Path

from elm_reactor.core.directory import gather_info, read_project
from elm_reactor.core.types import RequestPath


class TestGatherInfo:
    """Tests for gather_info()."""

    def test__entries__split_and_sorted(self, tmp_path: Path) -> None:
        (tmp_path / "src").mkdir()
        (tmp_path / "assets").mkdir()
        (tmp_path / "Main.elm").write_text("")
        (tmp_path / "README.md").write_text("")
        (tmp_path / "elm.json").write_text("{}")

        info = gather_info(tmp_path, RequestPath(""))

        assert [d.name for d in info.directories] == ["assets", "src"]
        assert [f.name for f in info.files] == ["elm.json", "Main.elm", "README.md"]

    def test__elm_files__marked_as_source(self, tmp_path: Path) -> None:
        (tmp_path / "Main.elm").write_text("")
        (tmp_path / "notes.txt").write_text("")

        info = gather_info(tmp_path, RequestPath(""))

        sources = {f.name: f.is_source for f in info.files}
        assert sources == {"Main.elm": True, "notes.txt": False}

    def test__hidden_and_build_dirs__skipped(self, tmp_path: Path) -> None:
        (tmp_path / ".git").mkdir()
        (tmp_path / "elm-stuff").mkdir()
        (tmp_path / ".env").write_text("")
        (tmp_path / "src").mkdir()

        info = gather_info(tmp_path, RequestPath(""))

        assert [d.name for d in info.directories] == ["src"]
        assert info.files == []

    def test__nested_directory__paths_and_breadcrumbs(self, tmp_path: Path) -> None:
        nested = tmp_path / "src" / "Page"
        nested.mkdir(parents=True)
        (nested / "Home.elm").write_text("")

        info = gather_info(nested, RequestPath("src/Page"))

        assert info.files[0].path == "src/Page/Home.elm"
        assert [(c.name, c.path) for c in info.breadcrumbs] == [
            ("~", ""),
            ("src", "src"),
            ("Page", "src/Page"),
        ]

    def test__project__only_read_for_root(self, tmp_path: Path) -> None:
        (tmp_path / "elm.json").write_text(json.dumps({"type": "application"}))
        sub = tmp_path / "sub"
        sub.mkdir()
        (sub / "elm.json").write_text(json.dumps({"type": "application"}))

        assert gather_info(tmp_path, RequestPath("")).project is not None
        assert gather_info(sub, RequestPath("sub")).project is None


class TestReadProject:
    """Tests for read_project()."""

    def test__application__direct_dependencies(self, tmp_path: Path) -> None:
        project_file = tmp_path / "elm.json"
        project_file.write_text(
            json.dumps(
                {
                    "type": "application",
                    "elm-version": "0.19.1",
                    "dependencies": {
                        "direct": {"elm/core": "1.0.5", "elm/html": "1.0.0"},
                        "indirect": {"elm/json": "1.1.3"},
                    },
                }
            )
        )

        project = read_project(project_file)

        assert project is not None
        assert project.kind == "application"
        assert project.elm_version == "0.19.1"
        assert project.dependencies == {"elm/core": "1.0.5", "elm/html": "1.0.0"}

    def test__package__flat_dependencies(self, tmp_path: Path) -> None:
        project_file = tmp_path / "elm.json"
        project_file.write_text(
            json.dumps(
                {
                    "type": "package",
                    "elm-version": "0.19.0 <= v < 0.20.0",
                    "dependencies": {"elm/core": "1.0.0 <= v < 2.0.0"},
                }
            )
        )

        project = read_project(project_file)

        assert project is not None
        assert project.kind == "package"
        assert project.dependencies == {"elm/core": "1.0.0 <= v < 2.0.0"}

    def test__missing_file__returns_none(self, tmp_path: Path) -> None:
        assert read_project(tmp_path / "elm.json") is None

    def test__malformed_json__returns_none(self, tmp_path: Path) -> None:
        project_file = tmp_path / "elm.json"
        project_file.write_text("{not json")

        assert read_project(project_file) is None

    def test__non_object__returns_none(self, tmp_path: Path) -> None:
        project_file = tmp_path / "elm.json"
        project_file.write_text("[1, 2]")

        assert read_project(project_file) is None
