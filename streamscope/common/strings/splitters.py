from typing import Iterable, List

def csv_to_list(v: str | Iterable[str] | None, *, lower: bool = False) -> List[str]:
    if v is None:
        return []
    if isinstance(v, str):
        items = v.split(",")
    else:
        items = [str(s) for s in v if s is not None]
    out = [s.strip() for s in items if s and s.strip()]
    return [s.lower() for s in out] if lower else out
