"""PySide6 application wiring for albumplayer."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from PySide6.QtCore import QRectF, Qt, QTimer
from PySide6.QtGui import QColor, QFont, QPainter, QPixmap
from PySide6.QtWidgets import QApplication, QWidget

from albumplayer.errors import ResourceError
from albumplayer.ui.layout import Rect
from albumplayer.ui.render import ZOrder
from albumplayer.ui.state import Key, MusicPlayerApp

_KEYS = {
    int(Qt.Key_Space): Key.SPACE,
    int(Qt.Key_Left): Key.LEFT,
    int(Qt.Key_Right): Key.RIGHT,
    int(Qt.Key_Up): Key.UP,
    int(Qt.Key_Down): Key.DOWN,
}


class QPainterCanvas:
    """Collects draw calls for a frame and paints them in z order."""

    def __init__(self, pixmaps: dict[Path, QPixmap]) -> None:
        self._pixmaps = pixmaps
        self._commands: list[tuple[ZOrder, Callable[[QPainter], None]]] = []

    def _pixmap(self, path: Path) -> QPixmap:
        pixmap = self._pixmaps.get(path)
        if pixmap is None:
            pixmap = QPixmap(path.as_posix())
            if pixmap.isNull():
                raise ResourceError(path, "image could not be loaded")
            self._pixmaps[path] = pixmap
        return pixmap

    def draw_rect(self, rect: Rect, color: str, z: ZOrder) -> None:
        qcolor = QColor(color)
        target = QRectF(rect.x, rect.y, rect.width, rect.height)
        self._commands.append((z, lambda painter: painter.fillRect(target, qcolor)))

    def draw_image(self, path: Path, rect: Rect, z: ZOrder) -> None:
        pixmap = self._pixmap(path)
        target = QRectF(rect.x, rect.y, rect.width, rect.height)
        self._commands.append(
            (z, lambda painter: painter.drawPixmap(target, pixmap, QRectF(pixmap.rect())))
        )

    def draw_text(self, text: str, x: float, y: float, size: int, color: str, z: ZOrder) -> None:
        font = QFont()
        font.setPixelSize(size)
        qcolor = QColor(color)

        def paint(painter: QPainter) -> None:
            painter.setFont(font)
            painter.setPen(qcolor)
            bounds = QRectF(x, y, painter.device().width() - x, size * 1.5)
            painter.drawText(bounds, Qt.AlignLeft | Qt.AlignTop, text)

        self._commands.append((z, paint))

    def flush(self, painter: QPainter) -> None:
        # sorted() is stable, so calls at the same depth keep their order.
        for _, command in sorted(self._commands, key=lambda entry: entry[0]):
            command(painter)
        self._commands.clear()


class PlayerWidget(QWidget):
    """Fixed size window that forwards input and paint events to the app."""

    def __init__(self, app_state: MusicPlayerApp) -> None:
        super().__init__()
        self._state = app_state
        self._pixmaps: dict[Path, QPixmap] = {}
        config = app_state.config
        self.setWindowTitle(config.window_title)
        self.setFixedSize(config.window_width, config.window_height)
        self.setFocusPolicy(Qt.StrongFocus)

        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(16)
        self._frame_timer.timeout.connect(self._on_frame)
        self._frame_timer.start()

    def _on_frame(self) -> None:
        self._state.tick()
        self.update()

    def _end_if_failed(self) -> bool:
        if not self._state.failed:
            return False
        self._frame_timer.stop()
        QTimer.singleShot(0, self.close)
        return True

    def paintEvent(self, event) -> None:  # noqa: N802 - Qt API
        canvas = QPainterCanvas(self._pixmaps)
        self._state.render(canvas)
        if self._end_if_failed():
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.SmoothPixmapTransform)
        try:
            canvas.flush(painter)
        finally:
            painter.end()

    def mousePressEvent(self, event) -> None:  # noqa: N802 - Qt API
        if event.button() != Qt.LeftButton:
            super().mousePressEvent(event)
            return
        position = event.position()
        self._state.handle_click(position.x(), position.y())
        if not self._end_if_failed():
            self.update()

    def keyPressEvent(self, event) -> None:  # noqa: N802 - Qt API
        key = _KEYS.get(int(event.key()))
        if key is None:
            super().keyPressEvent(event)
            return
        self._state.handle_key(key)
        if not self._end_if_failed():
            self.update()

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt API
        self._frame_timer.stop()
        self._state.close()
        super().closeEvent(event)


@dataclass
class PlayerApp:
    """Bootstrap the Qt event loop and the player window."""

    state: MusicPlayerApp
    on_exit: Callable[[], None] | None = None

    def run(self) -> int:
        app = QApplication.instance()
        created_app = False
        if app is None:
            app = QApplication(sys.argv)
            created_app = True

        app.aboutToQuit.connect(self.state.close)

        window = PlayerWidget(self.state)
        window.show()

        try:
            status = app.exec()
        finally:
            if created_app and self.on_exit is not None:
                # Release the mixer even if the window closed without closeEvent.
                self.on_exit()

        if self.state.error is not None:
            raise self.state.error
        return status
