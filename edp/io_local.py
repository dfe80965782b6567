import os, pandas as pd
from pathlib import Path

OUTPUT_DIR = os.environ.get("EDP_OUTPUT_DIR", "./data")

def _resolve(relpath: str, output_dir: str | None = None) -> Path:
    path = Path(relpath)
    if path.is_absolute():
        return path
    return Path(output_dir or OUTPUT_DIR) / path

def write_frame(df: pd.DataFrame, relpath: str, output_dir: str | None = None) -> Path:
    path = _resolve(relpath, output_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix == ".parquet":
        df.to_parquet(path, index=False)
    else:
        df.to_csv(path, index=False)
    return path

def read_frame(relpath: str, output_dir: str | None = None) -> pd.DataFrame:
    path = _resolve(relpath, output_dir)
    if path.suffix == ".parquet":
        return pd.read_parquet(path)
    return pd.read_csv(path)
