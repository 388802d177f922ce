"""Compare two environment snapshots."""


def diff(before: dict[str, str], after: dict[str, str]) -> dict[str, str]:
    """Return the entries of after that are new or hold a different value.

    Variables present only in before are not reported: the result can only say
    "set this", never "unset this".
    """
    changed: dict[str, str] = {}
    for name, value in after.items():
        if name in before and before[name] == value:
            continue
        changed[name] = value
    return changed
