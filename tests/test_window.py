import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from hotseat.app import build_parser
from hotseat.game_logic import GameEngine
from hotseat.ui.main_window import TicTacToeWindow


@pytest.fixture(scope="module")
def qapp():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


@pytest.fixture
def window(qapp):
    w = TicTacToeWindow(GameEngine(), recent=3)
    yield w
    w.close()


def click(window, moves):
    for m in moves:
        window.board_widget.cell_clicked.emit(m)


def test_initial_window(window):
    assert window.message_label.text() == "Next player: X"
    assert [l.text() for l in window.score_value_labels] == ["0 wins", "0 wins", "0"]
    assert window.recent_list.isHidden()


def test_win_updates_scores_and_recent(window):
    click(window, [0, 3, 1, 4, 2])
    assert window.message_label.text() == "Player X wins!"
    assert window.score_value_labels[0].text() == "1 wins"
    assert window.recent_list.count() == 1
    assert not window.recent_list.isHidden()
    assert window.recent_list.item(0).text().endswith("Player X wins (5 moves)")


def test_new_game_and_reset_scores(window):
    click(window, [0, 3, 1, 4, 2])
    window.new_game()
    assert window.message_label.text() == "Next player: X"
    assert window.recent_list.count() == 1
    window.reset_scores()
    assert window.score_value_labels[0].text() == "0 wins"
    assert window.recent_list.isHidden()


def test_recent_list_capped(window):
    for _ in range(5):
        click(window, [0, 1, 2, 4, 3, 5, 7, 6, 8])
        window.new_game()
    assert window.recent_list.count() == 3
    assert window.score_value_labels[2].text() == "5"


def test_board_widget_hit_testing(window):
    board = window.board_widget
    board.resize(300, 300)
    assert board.cell_at(10, 10) == 0
    assert board.cell_at(150, 150) == 4
    assert board.cell_at(290, 290) == 8
    assert board.cell_at(-5, 10) is None
    board.resize(400, 300)
    # grid is centered: 50px margin left and right
    assert board.cell_at(20, 150) is None
    assert board.cell_at(60, 150) == 3


def test_parser_defaults_and_validation():
    ns = build_parser().parse_args([])
    assert ns.recent == 5 and ns.verbose is False
    assert build_parser().parse_args(["-v", "--recent", "2"]).recent == 2
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--recent", "0"])
