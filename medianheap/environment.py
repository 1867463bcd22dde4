import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


def env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "t")


debug = env_flag("DEBUG")

log_level = "DEBUG" if debug else "INFO"


class BenchSettings(BaseModel):
    size: int = Field(8192, gt=0)
    rounds: int = Field(5, gt=0)
    profile: bool = False

    @classmethod
    def from_env(cls) -> "BenchSettings":
        values = {}
        size = os.getenv("MEDIANHEAP_BENCH_SIZE")
        if size is not None:
            values["size"] = size
        rounds = os.getenv("MEDIANHEAP_BENCH_ROUNDS")
        if rounds is not None:
            values["rounds"] = rounds
        profile = os.getenv("MEDIANHEAP_BENCH_PROFILE")
        if profile is not None:
            values["profile"] = profile
        return cls(**values)
