def format_info(depth, score, nodes, elapsed, best_move, win_score):
    move_str = best_move.uci() if best_move else "-"
    nps = int(nodes / elapsed) if elapsed > 0 else 0

    if abs(score) >= win_score:
        score_str = "win white" if score > 0 else "win black"
    else:
        score_str = f"material {score}"

    return f"info depth {depth} score {score_str} nodes {nodes} nps {nps} time {int(elapsed * 1000)} bestmove {move_str}"
