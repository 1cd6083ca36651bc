def format_info(depth, score, nodes, elapsed, turn):
    turn_str = " ".join(str(m) for m in turn) or "-"
    nps = int(nodes / elapsed) if elapsed > 0 else 0
    score_str = "inf" if score >= 1e9 else f"{score:.4f}"
    return f"info depth {depth} score {score_str} nodes {nodes} nps {nps} time {int(elapsed * 1000)} turn {turn_str}"
