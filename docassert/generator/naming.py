"""Unique names for generated test methods."""


def capitalize_first(name: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return name[:1].upper() + name[1:]


class MethodNamer:
    """Hands out generated method names, numbering repeats.

    One instance covers one generation run: `add` used three times yields
    `Add`, `Add2` and `Add3`. A numbered name that was already handed out
    (for a source method called `add2`, say) is skipped, so no two names
    from one run are equal.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}
        self._used: set[str] = set()

    def name(self, source_name: str) -> str:
        """Get the next free name for a source method."""
        base = capitalize_first(source_name)
        count = self._counts.get(base, 0)

        while True:
            count += 1
            candidate = base if count == 1 else f"{base}{count}"
            if candidate not in self._used:
                break

        self._counts[base] = count
        self._used.add(candidate)
        return candidate
