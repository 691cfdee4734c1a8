"""Tests for watchdog event routing."""

from watchdog.events import (
    DirModifiedEvent,
    FileClosedEvent,
    FileCreatedEvent,
    FileModifiedEvent,
    FileMovedEvent,
)

from rocbuild.watch.observer import DemoEventHandler, SourceEventHandler


class RecordingSession:
    def __init__(self):
        self.source = []
        self.demo = []

    def source_changed(self, path):
        self.source.append(path)

    def demo_changed(self, path):
        self.demo.append(path)


def _source_handler(tmp_path):
    session = RecordingSession()
    return session, SourceEventHandler(session, tmp_path / "src" / "icons.json")


def test_svg_change_triggers_rebuild(tmp_path):
    session, handler = _source_handler(tmp_path)
    handler.dispatch(FileModifiedEvent(str(tmp_path / "src/svg/outline/home.svg")))
    assert session.source == [str(tmp_path / "src/svg/outline/home.svg")]


def test_ontology_change_triggers_rebuild(tmp_path):
    session, handler = _source_handler(tmp_path)
    handler.dispatch(FileModifiedEvent(str(tmp_path / "src" / "icons.json")))
    assert len(session.source) == 1


def test_unrelated_files_are_ignored(tmp_path):
    session, handler = _source_handler(tmp_path)
    handler.dispatch(FileCreatedEvent(str(tmp_path / "src/svg/outline/notes.txt")))
    handler.dispatch(FileModifiedEvent(str(tmp_path / "src" / "other.json")))
    handler.dispatch(DirModifiedEvent(str(tmp_path / "src/svg/outline")))
    assert session.source == []


def test_reads_do_not_trigger(tmp_path):
    session, handler = _source_handler(tmp_path)
    handler.dispatch(FileClosedEvent(str(tmp_path / "src/svg/outline/home.svg")))
    assert session.source == []


def test_rename_into_svg_triggers(tmp_path):
    session, handler = _source_handler(tmp_path)
    handler.dispatch(
        FileMovedEvent(str(tmp_path / "src/svg/outline/.home.tmp"), str(tmp_path / "src/svg/outline/home.svg"))
    )
    assert session.source == [str(tmp_path / "src/svg/outline/home.svg")]


def test_demo_handler_takes_any_file(tmp_path):
    session = RecordingSession()
    handler = DemoEventHandler(session)
    handler.dispatch(FileModifiedEvent(str(tmp_path / "demo/src/app.js")))
    handler.dispatch(FileClosedEvent(str(tmp_path / "demo/src/app.js")))
    assert session.demo == [str(tmp_path / "demo/src/app.js")]
    assert session.source == []
