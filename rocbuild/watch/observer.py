"""Filesystem watching with watchdog — routes change events to a WatchSession."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from rocbuild.watch.session import WatchSession

logger = logging.getLogger(__name__)

# Opened/closed events fire when the build itself reads files
_CHANGE_EVENTS = {"created", "modified", "deleted", "moved"}


def _event_paths(event: FileSystemEvent) -> list[Path]:
    paths = [Path(str(event.src_path))]
    dest = getattr(event, "dest_path", "")
    if dest:
        paths.append(Path(str(dest)))
    return paths


class SourceEventHandler(FileSystemEventHandler):
    """*.svg changes under the source tree, or any change to the ontology file."""

    def __init__(self, session: WatchSession, ontology_path: Path, suffix: str = ".svg") -> None:
        self.session = session
        self.ontology_path = Path(ontology_path).resolve()
        self.suffix = suffix

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory or event.event_type not in _CHANGE_EVENTS:
            return
        for path in _event_paths(event):
            if path.suffix == self.suffix or path.resolve() == self.ontology_path:
                self.session.source_changed(str(path))
                return


class DemoEventHandler(FileSystemEventHandler):
    """Any file change in the demo payload directory."""

    def __init__(self, session: WatchSession) -> None:
        self.session = session

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory or event.event_type not in _CHANGE_EVENTS:
            return
        self.session.demo_changed(str(event.src_path))


def start_observer(
    session: WatchSession,
    src_dir: Path,
    ontology_path: Path,
    demo_src_dir: Path,
) -> Observer:
    """Schedule the source, ontology and demo watches and start the observer thread."""
    observer = Observer()
    source_handler = SourceEventHandler(session, ontology_path)

    if Path(src_dir).is_dir():
        observer.schedule(source_handler, str(src_dir), recursive=True)
    else:
        logger.warning("⚠ %s does not exist – not watching icon sources", src_dir)

    ontology_dir = Path(ontology_path).parent
    if ontology_dir.is_dir():
        observer.schedule(source_handler, str(ontology_dir), recursive=False)

    if Path(demo_src_dir).is_dir():
        observer.schedule(DemoEventHandler(session), str(demo_src_dir), recursive=False)
    else:
        logger.warning("⚠ %s does not exist – not watching demo payloads", demo_src_dir)

    observer.start()
    logger.info("Watching %s and %s for changes...", src_dir, demo_src_dir)
    return observer


def watch_forever(session: WatchSession, observer: Observer) -> None:
    """Block until interrupted, then stop the observer and pending timers."""
    try:
        while observer.is_alive():
            time.sleep(1)
    except KeyboardInterrupt:
        logger.info("Stopping watch mode")
    finally:
        session.stop()
        observer.stop()
        observer.join()
