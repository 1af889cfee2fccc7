from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import BOARD_SIZE, Mark, cell_index

BACKGROUND_COLOR = QColor("#333")
GRID_COLOR = QColor("#555")
WIN_CELL_COLOR = QColor("#3d5a3d")
MARK_COLORS = {Mark.X: QColor("#8acaff"), Mark.O: QColor("#ff8a8a")}


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits cell index on click

    def __init__(self, engine, parent=None):
        super().__init__(parent)
        self.engine = engine  # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square grid centered in the widget: (left, top, cell size)
        side = min(self.width(), self.height())
        ox, oy = (self.width() - side) / 2, (self.height() - side) / 2
        return ox, oy, side / BOARD_SIZE

    def paintEvent(self, event):
        """
        draw win highlight, grid, X/O marks
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, cell = self._geometry()
            side = cell * BOARD_SIZE
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            # tint winning cells first so the grid draws over them
            line = self.engine.status().line or ()
            for idx in line:
                r, c = divmod(idx, BOARD_SIZE)
                painter.fillRect(QRectF(ox + c*cell, oy + r*cell, cell, cell), WIN_CELL_COLOR)
            # grid lines
            painter.setPen(QPen(GRID_COLOR, 2))
            for i in range(1, BOARD_SIZE):
                x = ox + i*cell
                painter.drawLine(QPointF(x, oy), QPointF(x, oy + side))
                y = oy + i*cell
                painter.drawLine(QPointF(ox, y), QPointF(ox + side, y))
            # marks
            for idx, mark in enumerate(self.engine.board):
                if mark is None:
                    continue
                r, c = divmod(idx, BOARD_SIZE)
                cx = ox + c*cell + cell/2
                cy = oy + r*cell + cell/2
                rad = cell/2 * 0.6
                painter.setPen(QPen(MARK_COLORS[mark], 4))
                if mark is Mark.X:
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def cell_at(self, x, y):
        """
        widget coords -> cell index, None outside the grid
        """
        ox, oy, cell = self._geometry()
        if cell <= 0:
            return None
        col = int((x - ox) // cell)
        row = int((y - oy) // cell)
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            return None
        return cell_index(row, col)

    def mouseReleaseEvent(self, event):
        """
        map click to a cell and emit; filled cells and finished games ignored
        """
        pos = event.position()
        idx = self.cell_at(pos.x(), pos.y())
        if idx is None or self.engine.status().outcome.is_terminal:
            return
        if self.engine.board[idx] is not None:
            return
        self.cell_clicked.emit(idx)  # notify main window
