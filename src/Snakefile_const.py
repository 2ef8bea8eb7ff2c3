import os
import pathlib

pwd = pathlib.Path(os.getcwd())
proj_dir = pwd.parents[0]

DATA = proj_dir / "data"
RAW = DATA / "raw"
END = DATA / "processed"
INT = DATA / "interim"

SRC = proj_dir / "src"

HUE_SAMPLES = RAW / "hue_samples.csv"
