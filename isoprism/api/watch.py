import sys
import time
from pathlib import Path

from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler


class ChangeHandler(FileSystemEventHandler):
    """Flags the watcher for a reload when the watched file is modified."""

    def __init__(self, watcher):
        super().__init__()
        self.watcher = watcher

    def on_modified(self, event):
        if event.is_directory:
            return
        if Path(event.src_path).resolve() == self.watcher.path:
            self.watcher.reload_pending = True


class SceneWatcher:
    """
    Re-runs a render callback whenever a scene file changes.

    The watchdog observer thread only sets `reload_pending`; the callback
    always runs on the thread that called `run()`.
    """

    def __init__(self, path, render, interval: float = 0.2):
        """
        Initializes the watcher.

        Args:
            path (str): The scene file to watch.
            render (callable): Called with no arguments on every change.
            interval (float, optional): Seconds between checks for a pending reload.
        """
        self.path = Path(path).resolve()
        self.render = render
        self.interval = interval
        self.reload_pending = False
        self.observer = None

    def start(self):
        self.observer = Observer()
        self.observer.schedule(ChangeHandler(self), str(self.path.parent), recursive=False)
        self.observer.daemon = True
        self.observer.start()
        print(f"INFO: Watching '{self.path.name}' for changes...")

    def stop(self):
        if self.observer is not None:
            self.observer.stop()
            self.observer.join()
            self.observer = None

    def reload(self) -> bool:
        """Runs the render callback once. Returns whether it succeeded."""
        self.reload_pending = False
        print("INFO: Reloading...")
        try:
            self.render()
        except Exception as e:
            print(f"ERROR: Reload failed: {e}", file=sys.stderr)
            return False
        return True

    def poll(self) -> bool:
        """Reloads if a change is pending. Returns whether a reload ran."""
        if not self.reload_pending:
            return False
        self.reload()
        return True

    def run(self):
        """Watches until interrupted with Ctrl+C."""
        self.start()
        try:
            while True:
                self.poll()
                time.sleep(self.interval)
        except KeyboardInterrupt:
            print("INFO: Stopped watching.")
        finally:
            self.stop()
