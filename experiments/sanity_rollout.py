# /experiments/sanity_rollout.py
"""
Sanity rollouts for MinigunEnv:
- Runs RANDOM and/or TINY-HEURISTIC policies over fixed seeds
- Writes an episodes CSV for notebook analysis
- Optionally saves per-episode action sequences for later inspection

Usage examples (from repo root):
  # Run both policies over 20 default seeds, frame_skip=4, save traces:
  python -m experiments.sanity_rollout --policies both --save-traces

  # Only heuristic, custom seeds:
  python -m experiments.sanity_rollout --policies heuristic --seeds 111,222,333

  # Quick random-only smoke with fewer steps:
  python -m experiments.sanity_rollout --policies random --steps 300 --out-dir /tmp/sanity
"""

from __future__ import annotations
import argparse
import csv
import logging
import math
from pathlib import Path
from typing import List, Tuple

import numpy as np

from src.env.minigun_env import MinigunEnv, AIM_SECTORS
from src.env.observations import PLAYER_FEATS
from src.minigun.config import WIDTH, HEIGHT


# ------------------------ Policies ------------------------

def random_policy_init(action_seed: int):
    rng = np.random.RandomState(action_seed)
    def act(_obs: np.ndarray) -> np.ndarray:
        return np.array([rng.randint(0, 3), rng.randint(0, 2), rng.randint(0, 2),
                         rng.randint(0, AIM_SECTORS)], dtype=np.int64)
    return act

def tiny_heuristic_policy_init():
    """
    Very small rule:
      - Always fire at the nearest zombie (aim sector from its dx/dy).
      - Back off (move left) when it is within ~200 px to the right, and jump
        when it is closer than ~90 px.
      - With no zombie around, hold still and aim right.
    """
    def act(obs: np.ndarray) -> np.ndarray:
        dx_n, dy_n, _hp, present = obs[PLAYER_FEATS:PLAYER_FEATS + 4]
        if present < 0.5:
            return np.array([1, 0, 0, 0], dtype=np.int64)
        dx, dy = dx_n * WIDTH, dy_n * HEIGHT
        ang = math.atan2(dy, dx) % (2.0 * math.pi)
        sector = int(round(ang / (2.0 * math.pi) * AIM_SECTORS)) % AIM_SECTORS
        move = 0 if 0.0 < dx < 200.0 else 1
        jump = 1 if abs(dx) < 90.0 else 0
        return np.array([move, jump, 1, sector], dtype=np.int64)
    return act


# ------------------------ Rollout core ------------------------

def ensure_dir(p: Path):
    p.mkdir(parents=True, exist_ok=True)

def write_episode_row(csv_path: Path, header: List[str], row: List):
    exists = csv_path.exists()
    with csv_path.open("a", newline="") as f:
        w = csv.writer(f)
        if not exists:
            w.writerow(header)
        w.writerow(row)

def run_one_episode(policy_name: str,
                    seed: int,
                    frame_skip: int,
                    steps_limit: int,
                    save_traces: bool,
                    out_dir: Path) -> Tuple[int, float, int, int, bool, bool]:
    """
    Returns: (ep_len, ret_sum, score, health, terminated, truncated)
    Also writes traces to disk if requested.
    """
    env = MinigunEnv(frame_skip=frame_skip)

    if policy_name == "random":
        # Make action RNG seed a function of seed for determinism
        action_seed = 10_000 + seed
        policy = random_policy_init(action_seed)
    elif policy_name == "heuristic":
        action_seed = -1
        policy = tiny_heuristic_policy_init()
    else:
        raise ValueError(f"Unknown policy {policy_name!r}")

    actions: List[np.ndarray] = []
    ret_sum = 0.0
    ep_len = 0
    term = trunc = False
    info = {}

    try:
        obs, info = env.reset(seed=seed)
        for _ in range(steps_limit):
            a = policy(obs)
            actions.append(a)
            obs, r, term, trunc, info = env.step(a)
            ret_sum += float(r)
            ep_len += 1
            if term or trunc:
                break
    finally:
        env.close()

    if save_traces:
        trace_dir = out_dir / "traces" / policy_name
        ensure_dir(trace_dir)
        np.save(trace_dir / f"{seed}_actions.npy", np.asarray(actions, dtype=np.int8).reshape(-1, 4))
        meta_lines = [
            f"seed={seed}",
            f"frame_skip={frame_skip}",
            f"policy={policy_name}",
            f"action_rng_seed={action_seed}",
            f"steps_limit={steps_limit}",
        ]
        (trace_dir / f"{seed}_meta.txt").write_text("\n".join(meta_lines), encoding="utf-8")

    return ep_len, ret_sum, int(info.get("score", 0)), int(info.get("health", 0)), bool(term), bool(trunc)


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--policies", type=str, default="both",
                    choices=["random", "heuristic", "both"],
                    help="Which policy to run")
    ap.add_argument("--seeds", type=str, default="",
                    help="Comma-separated seeds. If empty, uses 20 defaults: 101..120")
    ap.add_argument("--frame-skip", type=int, default=4,
                    help="Sim frames per decision step")
    ap.add_argument("--steps", type=int, default=10_000,
                    help="Hard cap on decision steps (env may truncate earlier)")
    ap.add_argument("--out-dir", type=str, default="experiments/runs",
                    help="Directory to store episodes.csv and traces/")
    ap.add_argument("--save-traces", action="store_true",
                    help="Save action sequences for each episode")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    out_dir = Path(args.out_dir)
    ensure_dir(out_dir)

    if args.seeds.strip():
        seeds = [int(s) for s in args.seeds.split(",") if s.strip()]
    else:
        seeds = list(range(101, 121))  # 20 fixed eval seeds by default

    episodes_csv = out_dir / "episodes.csv"
    header = [
        "env_name", "policy_name", "seed",
        "frame_skip", "sim_fps", "decision_hz",
        "episode_len_decisions", "return_sum", "score", "health",
        "terminated", "truncated",
    ]
    sim_fps = 60
    decision_hz = sim_fps / max(1, args.frame_skip)

    to_run = ["random", "heuristic"] if args.policies == "both" else [args.policies]

    print(f"Running policies={to_run} on {len(seeds)} seeds "
          f"(frame_skip={args.frame_skip}, decision_hz≈{decision_hz:.1f})")
    print(f"Writing summaries to {episodes_csv}")

    for policy_name in to_run:
        for seed in seeds:
            ep_len, ret_sum, score, health, terminated, truncated = run_one_episode(
                policy_name=policy_name,
                seed=seed,
                frame_skip=args.frame_skip,
                steps_limit=args.steps,
                save_traces=args.save_traces,
                out_dir=out_dir
            )
            row = [
                "MinigunEnv", policy_name, seed,
                args.frame_skip, sim_fps, decision_hz,
                ep_len, f"{ret_sum:.1f}", score, health,
                int(terminated), int(truncated),
            ]
            write_episode_row(episodes_csv, header, row)

            print(f"[{policy_name}] seed={seed}  len={ep_len}  score={score}  health={health}  "
                  f"ret={ret_sum:.1f}  term={terminated} trunc={truncated}")

    print("✓ Sanity rollouts complete")


if __name__ == "__main__":
    main()
