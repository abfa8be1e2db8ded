import json
import sys
from pathlib import Path


def normalize_timestamps(log_text: str) -> str:
    """
    Rewrite 'ts_ms' of every JSONL record relative to the first one:
    - subtract the first ts_ms found
    - divide by 1e3 (milliseconds -> seconds)

    Lines that are not JSON objects with an integer ts_ms pass through.
    """
    out: list[str] = []
    t0: int | None = None

    for line in log_text.splitlines():
        try:
            record = json.loads(line)
        except json.JSONDecodeError:
            out.append(line)
            continue

        if not isinstance(record, dict) or not isinstance(record.get("ts_ms"), int):
            out.append(line)
            continue

        if t0 is None:
            t0 = record["ts_ms"]

        record["ts_ms"] = round((record["ts_ms"] - t0) / 1e3, 3)
        out.append(json.dumps(record, ensure_ascii=False, separators=(",", ":")))

    return "\n".join(out)


if __name__ == "__main__":
    # usage: python tools/normalize_log.py server.log
    src = Path(sys.argv[1])
    normalized = normalize_timestamps(src.read_text(encoding="utf-8"))

    out_path = src.with_suffix(".normalized.log")
    out_path.write_text(normalized, encoding="utf-8")
