# -----------------------------------------------------------------------------
# Jump profile catalog
# Purpose: parse a YAML catalog of named jump profiles into resolved
# Trajectory objects. Designers describe each jump by two known parameters:
#
#   profiles:
#     primary:
#       notes: "main jump"
#       tags: [ground]
#       known: {height: 20, time: 2}
#     short_hop:
#       known: {height: "3 ft", impulse: {from: primary}}
#
# - Numbers are read in canonical units, strings may carry units (pint).
# - {from: <profile>} reuses that parameter of another profile's trajectory,
#   e.g. a low jump keeping the primary jump's impulse.
# -----------------------------------------------------------------------------

from __future__ import annotations
import yaml
from dataclasses import dataclass, field
from typing import Any, Dict, List, Set

from .trajectory import Trajectory
from .types import ParameterKind
from .units import UnitError, to_canonical


# Domain-specific error to signal malformed catalog inputs, bad references, etc.
class CatalogError(Exception): pass


def _tags(name: str, tags: Any) -> List[str]:
    # A single scalar tag is accepted as a one-element list
    if tags is None:
        return []
    if isinstance(tags, (str, int, float)):
        return [str(tags)]
    if not isinstance(tags, list):
        raise CatalogError(f"Profile '{name}': tags must be a list, got {tags!r}.")
    return [str(t) for t in tags]


@dataclass
class JumpProfile:
    # One named jump: two known parameters plus descriptive metadata.
    name: str
    known: Dict[ParameterKind, Any]
    notes: str = ""
    tags: List[str] = field(default_factory=list)


@dataclass
class JumpCatalog:
    profiles: Dict[str, JumpProfile]

    @staticmethod
    def from_yaml_dict(d: Dict[str, Any]) -> "JumpCatalog":
        """Build a catalog from a pre-parsed YAML dictionary (see module header)."""
        profiles: Dict[str, JumpProfile] = {}
        if d is not None and not isinstance(d, dict):
            raise CatalogError("Catalog root must be a mapping.")
        section = (d or {}).get("profiles") or {}
        if not isinstance(section, dict):
            raise CatalogError("'profiles' must map profile names to profile bodies.")
        for name, pd in section.items():
            pd = pd or {}
            if not isinstance(pd, dict):
                raise CatalogError(f"Profile '{name}' must be a mapping, got {pd!r}.")
            raw = pd.get("known") or {}
            if not isinstance(raw, dict):
                raise CatalogError(f"Profile '{name}': 'known' must be a mapping, got {raw!r}.")
            if len(raw) != 2:
                raise CatalogError(f"Profile '{name}' needs exactly two known parameters.")
            try:
                known = {ParameterKind.parse(k): v for k, v in raw.items()}
            except ValueError as e:
                raise CatalogError(f"Profile '{name}': {e}") from e
            if len(known) != 2:
                raise CatalogError(f"Profile '{name}' names the same parameter twice.")
            profiles[name] = JumpProfile(
                name=name, known=known,
                notes=str(pd.get("notes", "")),
                tags=_tags(name, pd.get("tags")),
            )
        return JumpCatalog(profiles=profiles)

    @staticmethod
    def from_yaml_text(text: str) -> "JumpCatalog":
        return JumpCatalog.from_yaml_dict(yaml.safe_load(text))

    @staticmethod
    def from_file(path: str) -> "JumpCatalog":
        with open(path, "r", encoding="utf-8") as f:
            return JumpCatalog.from_yaml_text(f.read())

    def trajectory(self, name: str) -> Trajectory:
        """Resolve a profile; DivisionByZero from the engine propagates."""
        return self._resolve(name, set(), {})

    def trajectories(self) -> Dict[str, Trajectory]:
        done: Dict[str, Trajectory] = {}
        for name in self.profiles:
            self._resolve(name, set(), done)
        return done

    def _resolve(self, name: str, visiting: Set[str], done: Dict[str, Trajectory]) -> Trajectory:
        if name in done:
            return done[name]
        if name not in self.profiles:
            raise CatalogError(f"Unknown profile: {name}")
        if name in visiting:
            raise CatalogError(f"Circular reference through profile '{name}'.")
        visiting.add(name)
        values = {}
        for kind, raw in self.profiles[name].known.items():
            if isinstance(raw, dict):
                # {from: other_profile} borrows the same parameter
                if "from" not in raw:
                    raise CatalogError(f"Profile '{name}': {kind} reference needs a 'from' key.")
                values[kind.value] = self._resolve(str(raw["from"]), visiting, done).get(kind)
            else:
                try:
                    values[kind.value] = to_canonical(kind, raw)
                except UnitError as e:
                    raise CatalogError(f"Profile '{name}': {e}") from e
        visiting.discard(name)
        done[name] = Trajectory.from_known(**values)
        return done[name]

    def list_profiles(self) -> List[Dict[str, Any]]:
        """Flattened, UI-friendly listing of profiles."""
        out = []
        for p in self.profiles.values():
            out.append({
                "name": p.name, "notes": p.notes, "tags": p.tags,
                "known": {k.value: v for k, v in p.known.items()},
            })
        return out
