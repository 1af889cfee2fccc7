"""
display strings for the window; no qt here so they test headless
"""

RECENT_GAMES = 5        # history lines shown under the score board


def status_message(status):
    # banner text above the board
    if status.summary == "winner":
        return f"Player {status.outcome.winner} wins!"
    if status.summary == "draw":
        return "It's a draw!"
    return f"Next player: {status.next_player}"


def score_labels(scores):
    """
    (title, value) per score panel: X, O, draws
    """
    return (
        ("Player X", f"{scores.x_wins} wins"),
        ("Player O", f"{scores.o_wins} wins"),
        ("Draws", str(scores.draws)),
    )


def format_timestamp(dt):
    return dt.strftime("%H:%M:%S")


def history_line(entry):
    result = "Draw" if entry.is_draw else f"Player {entry.winner} wins"
    return f"{format_timestamp(entry.timestamp)} - {result} ({entry.move_count} moves)"


def recent_games(engine, limit=RECENT_GAMES):
    # newest first
    return [history_line(e) for e in engine.history(limit=limit, newest_first=True)]
