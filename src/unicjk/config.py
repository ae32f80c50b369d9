from pydantic import BaseModel, Field
from pathlib import Path
import yaml

# Defaults mirror config/default.yaml
class ScanConfig(BaseModel):
    # Count only alphabetic characters when computing the CJK fraction
    alpha_only: bool = True
    min_cjk_fraction: float = Field(default=0.5, ge=0.0, le=1.0)
    show_runs: bool = False

class Config(BaseModel):
    scan: ScanConfig

def config_path(config_name: str): return Path(f"config/{config_name}.yaml")


def load_config(config_name) -> Config:
    return Config.model_validate(yaml.safe_load(config_path(config_name).read_text()))
