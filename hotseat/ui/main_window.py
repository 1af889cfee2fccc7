from ..game_logic import GameEngine
from ..ui.board_widget import BoardWidget
from ..ui.text import RECENT_GAMES, recent_games, score_labels, status_message

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QGroupBox,
    QListWidget, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

STATUS_STYLES = {
    "next-player": "color: #8acaff; font-weight: bold;",
    "winner": "color: lime; font-weight: bold;",
    "draw": "color: #ffd27f; font-weight: bold;",
}


class TicTacToeWindow(QMainWindow):
    """
    main window: board, status, score board and recent games
    """
    def __init__(self, engine=None, recent=RECENT_GAMES):
        """
        init engine, ui widgets, signals
        """
        super().__init__()
        self.engine = engine if engine is not None else GameEngine()
        self.recent = recent              # history lines to show
        self.board_widget = BoardWidget(self.engine, parent=self)
        self._setup_ui()
        self.refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QGroupBox { color: #eee; font-weight: bold; }
            QListWidget { background-color: #2b2b2b; color: #ddd; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(14); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.message_label)

        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self.new_game_button = QPushButton("New Game")
        self.new_game_button.clicked.connect(self.new_game)
        self.main_layout.addWidget(self.new_game_button, alignment=Qt.AlignCenter)

        self._create_score_board()         # scores + history
        self.main_layout.addWidget(self.score_group)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.new_game)
        reset_action = QAction("Reset Scores", self)
        reset_action.triggered.connect(self.reset_scores)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (new_action, reset_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_score_board(self):
        '''score panels, reset button, recent games list'''
        self.score_group = QGroupBox("Score Board")
        layout = QVBoxLayout()
        panels = QHBoxLayout()
        self.score_value_labels = []
        for title, _ in score_labels(self.engine.scores()):
            box = QVBoxLayout()
            title_label = QLabel(title); title_label.setAlignment(Qt.AlignCenter)
            value_label = QLabel(""); value_label.setAlignment(Qt.AlignCenter)
            box.addWidget(title_label); box.addWidget(value_label)
            panels.addLayout(box)
            self.score_value_labels.append(value_label)
        layout.addLayout(panels)

        self.reset_scores_button = QPushButton("Reset Scores")
        self.reset_scores_button.clicked.connect(self.reset_scores)
        layout.addWidget(self.reset_scores_button, alignment=Qt.AlignCenter)

        self.recent_title = QLabel("Recent Games:")
        self.recent_list = QListWidget()
        self.recent_list.setMaximumHeight(150)
        self.recent_list.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
        layout.addWidget(self.recent_title)
        layout.addWidget(self.recent_list)
        self.score_group.setLayout(layout)

    def refresh(self):
        """
        redraw everything from engine state
        """
        status = self.engine.status()
        self.message_label.setText(status_message(status))
        self.message_label.setStyleSheet(STATUS_STYLES[status.summary])

        for label, (_, value) in zip(self.score_value_labels,
                                     score_labels(self.engine.scores())):
            label.setText(value)

        lines = recent_games(self.engine, self.recent)
        self.recent_list.clear()
        self.recent_list.addItems(lines)
        # only show history once a game finished
        self.recent_title.setVisible(bool(lines))
        self.recent_list.setVisible(bool(lines))
        self.board_widget.update()

    @Slot(int)
    def _on_cell_clicked(self, idx):
        if self.engine.play(idx):
            self.refresh()

    @Slot()
    def new_game(self):
        self.engine.new_game()
        self.refresh()

    @Slot()
    def reset_scores(self):
        self.engine.reset_scores()
        self.refresh()
