"""Entry point for cyclecomplete.

Usage:
    python -m cyclecomplete.main [FILE]                  # editor window
    python -m cyclecomplete.main --list FILE LINE COL    # print candidates, no GUI
"""
import sys
import signal
import logging
import argparse
from pathlib import Path


def setup_logging(debug: bool = False):
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def list_candidates(text: str, line: int, column: int, config=None):
    """Return the candidates next() would cycle through at (line, column).

    line and column are 0-based. Returns None if the position is not at the
    end of a word.
    """
    from cyclecomplete.autocomplete import SimpleAutocomplete
    from cyclecomplete.document import BufferEditor, Selection
    from cyclecomplete.tokenizer import DEFAULT_WORD_SEPARATORS

    separators = config.word_separators if config is not None else DEFAULT_WORD_SEPARATORS
    editor = BufferEditor(text, [Selection.cursor(line, column)], word_separators=separators)
    autocomplete = SimpleAutocomplete(config)
    if not autocomplete.can_autocomplete(editor):
        return None

    while not autocomplete.session.scan_exhausted:
        autocomplete.next(editor)
        if not autocomplete.session.is_active:
            return None
    return list(autocomplete.session.matches)


def run_list(path: str, line: int, column: int) -> int:
    from cyclecomplete.config import Config

    config = Config()
    setup_logging(config.debug_logging)
    logger = logging.getLogger(__name__)

    try:
        text = Path(path).read_text(encoding="utf-8")
    except (IOError, UnicodeDecodeError) as e:
        logger.error("Cannot read %s: %s", path, e)
        return 2

    try:
        matches = list_candidates(text, line - 1, column - 1, config)
    except ValueError as e:
        logger.error("Bad position %d:%d: %s", line, column, e)
        return 2

    if matches is None:
        logger.error("No word ends at %d:%d", line, column)
        return 1

    for match in matches:
        print(match)
    return 0


def run_editor(path=None) -> int:
    """Open an editor window with cycling completion."""
    from PyQt5.QtWidgets import QApplication, QMainWindow, QAction
    from cyclecomplete.config import Config
    from cyclecomplete.qt_editor import CompletingTextEdit

    app = QApplication(sys.argv)
    app.setApplicationName("cyclecomplete")

    config = Config()
    setup_logging(config.debug_logging)
    logger = logging.getLogger(__name__)

    window = QMainWindow()
    window.setWindowTitle(f"cyclecomplete — {path}" if path else "cyclecomplete")
    editor = CompletingTextEdit(config)
    window.setCentralWidget(editor)
    window.resize(800, 600)

    if path:
        try:
            editor.setPlainText(Path(path).read_text(encoding="utf-8"))
        except (IOError, UnicodeDecodeError) as e:
            logger.warning("Cannot open %s: %s", path, e)

    settings_window = []

    def _open_settings():
        from cyclecomplete.settings_ui import SettingsWindow
        if not settings_window:
            settings_window.append(SettingsWindow(config, editor))
        settings_window[0].refresh()
        settings_window[0].show()
        settings_window[0].raise_()
        settings_window[0].activateWindow()

    settings_action = QAction("Settings...", window)
    settings_action.triggered.connect(_open_settings)
    window.menuBar().addAction(settings_action)

    logger.info("Editor ready — %s cycles forward, %s backward",
                config.hotkey_next, config.hotkey_previous)
    window.show()
    return app.exec_()


def main():
    signal.signal(signal.SIGINT, signal.SIG_DFL)

    parser = argparse.ArgumentParser(description="cyclecomplete")
    parser.add_argument("file", nargs="?", help="File to open")
    parser.add_argument("--list", nargs=3, metavar=("FILE", "LINE", "COLUMN"),
                        help="Print completion candidates at a 1-based position and exit")
    args = parser.parse_args()

    if args.list:
        path, line, column = args.list
        try:
            line, column = int(line), int(column)
        except ValueError:
            parser.error("LINE and COLUMN must be integers")
        sys.exit(run_list(path, line, column))

    sys.exit(run_editor(args.file))


if __name__ == "__main__":
    main()
