"""
Static evaluation of non-terminal positions.

Six features, each the player's count minus the opponent's (blocked pieces
the other way round), weighted by the phase of the player to evaluate for.
"""
from typing import Dict, List, Sequence

from morris import MILLS, MILLS_BY_POSITION, Game, Phase, Player

PHASE_WEIGHTS: Dict[Phase, Dict[str, int]] = {
    Phase.PLACING: {
        'double_mill': 10,
        'mill': 20,
        'pieces': 30,
        'two_piece_conf': 6,
        'three_piece_conf': 5,
        'blocked_pieces': 1,
    },
    Phase.MOVING: {
        'double_mill': 40,
        'mill': 20,
        'pieces': 30,
        'two_piece_conf': 3,
        'three_piece_conf': 2,
        'blocked_pieces': 7,
    },
    Phase.FLYING: {
        'double_mill': 50,
        'mill': 10,
        'pieces': 30,
        'two_piece_conf': 10,
        'three_piece_conf': 5,
        'blocked_pieces': 0,
    },
}


def classify_rows(game: Game, player: Player):
    """
    Split the mill lines into rows owned by player and by the opponent.

    Each line lands on at most one side: a mill or a two-piece configuration
    (two pieces, one empty) of one player. A row is the list of that owner's
    positions on the line, so mills have length 3 and two-piece rows length 2.
    """
    positions = game.board.positions
    player_rows: List[List[int]] = []
    opponent_rows: List[List[int]] = []

    for mill in MILLS:
        mine, theirs, empty = [], [], 0
        for index in mill:
            occupant = positions[index].occupant
            if occupant is player:
                mine.append(index)
            elif occupant is None:
                empty += 1
            else:
                theirs.append(index)

        if len(mine) == 3 or (len(mine) == 2 and empty == 1):
            player_rows.append(mine)
        elif len(theirs) == 3 or (len(theirs) == 2 and empty == 1):
            opponent_rows.append(theirs)

    return player_rows, opponent_rows


def count_three_piece_conf(rows: Sequence[Sequence[int]]) -> int:
    """Positions shared by more than one two-piece row (double threats)."""
    flat = [index for row in rows if len(row) == 2 for index in row]
    return len(flat) - len(set(flat))


def count_double_mills(game: Game, player: Player, rows: Sequence[Sequence[int]]) -> int:
    """
    For each piece of each of player's mills, count the empty neighbours that
    would close a different mill if the piece stepped there.
    """
    positions = game.board.positions
    count = 0
    for row in rows:
        if len(row) != 3:
            continue
        for index in row:
            for neighbour in positions[index].adjacent:
                if neighbour.occupant is not None:
                    continue
                for mill in MILLS_BY_POSITION[neighbour.index]:
                    if index in mill:
                        continue
                    if all(positions[i].occupant is player
                           for i in mill if i != neighbour.index):
                        count += 1
                        break
    return count


def count_blocked_pieces(game: Game, player: Player) -> int:
    """
    Blocked-piece metric for player's pieces.

    For each piece, neighbours are walked in adjacency order and counted while
    they hold an opponent piece; the walk stops at the first one that does not.
    A piece with a free neighbour after an opponent one still counts.
    """
    opponent = game.other_player(player)
    count = 0
    for pos in game.board.positions:
        if pos.occupant is not player:
            continue
        for neighbour in pos.adjacent:
            if neighbour.occupant is not opponent:
                break
            count += 1
    return count


def evaluate_features(game: Game, player: Player) -> Dict[str, int]:
    """Feature differences from player's point of view."""
    opponent = game.other_player(player)
    player_rows, opponent_rows = classify_rows(game, player)

    return {
        'double_mill': (count_double_mills(game, player, player_rows)
                        - count_double_mills(game, opponent, opponent_rows)),
        'mill': (sum(1 for r in player_rows if len(r) == 3)
                 - sum(1 for r in opponent_rows if len(r) == 3)),
        'pieces': player.remaining - opponent.remaining,
        'two_piece_conf': (sum(1 for r in player_rows if len(r) == 2)
                           - sum(1 for r in opponent_rows if len(r) == 2)),
        'three_piece_conf': (count_three_piece_conf(player_rows)
                             - count_three_piece_conf(opponent_rows)),
        'blocked_pieces': (count_blocked_pieces(game, opponent)
                           - count_blocked_pieces(game, player)),
    }


def evaluate(game: Game, player: Player) -> int:
    """Score of the position for player; positive is good for player."""
    weights = PHASE_WEIGHTS[player.phase]
    features = evaluate_features(game, player)
    return sum(weights[name] * value for name, value in features.items())
