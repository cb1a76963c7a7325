from __future__ import annotations

from abc import ABCMeta
from typing import (
    Any, Dict, Tuple, TypeVar, List, ClassVar, Type,
)
import copy as _py_copy
import uuid
import json
import inspect

T = TypeVar("T", bound="SerializableBase")

# ############################## Meta #################################
class SerializableMeta(ABCMeta):
    """
    Auto-discovers @property names to serialize if neither the class nor
    any of its bases provides a non-empty __serialize_fields__.

    Derives from ABCMeta so abstract figure classes can use it directly.
    """
    def __new__(mcs, name: str, bases: Tuple[type, ...], dct: Dict[str, Any], **kwargs: Any) -> SerializableMeta:
        cls = super().__new__(mcs, name, bases, dct, **kwargs)
        inherited = any(getattr(b, "__serialize_fields__", None) for b in bases)
        if "__serialize_fields__" not in dct and not inherited:
            discovered: List[str] = []
            for c in inspect.getmro(cls):
                if c is object:
                    break
                for attr, member in c.__dict__.items():
                    if isinstance(member, property):
                        discovered.append(attr)
            # keep order, drop dups
            setattr(cls, "__serialize_fields__", list(dict.fromkeys(discovered)))
        return cls  # type: ignore[return-value]


# ########################### Serializable ############################
class SerializableBase(metaclass=SerializableMeta):
    """
    Unified dict/JSON (de)serialization for figure-domain objects.
    - Serializes properties listed in __serialize_fields__ (auto-collected).
    - Handles nested SerializableBase objects, point-like `to_dict` values and sequences.
    - Adds "__type__" and "__version__" meta keys.
    """
    __slots__: Tuple[str, ...] = tuple()
    _SERIAL_VERSION: int = 1
    __serialize_fields__: ClassVar[List[str]]

    # ########### Serialization ###########
    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for k in getattr(self, "__serialize_fields__", ()):
            out[k] = self._serialize_value(getattr(self, k))
        out["__type__"] = self.__class__.__name__
        out["__version__"] = getattr(self, "_SERIAL_VERSION", 1)
        return out

    def _serialize_value(self, value: Any) -> Any:
        if isinstance(value, SerializableBase):
            return value.to_dict()
        if isinstance(value, (list, tuple)):
            return [self._serialize_value(i) for i in value]
        if hasattr(value, "to_dict") and callable(value.to_dict):
            return value.to_dict()
        return value

    # ########### Deserialization ##########
    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        raise NotImplementedError(f"{cls.__name__} does not define from_dict.")

    # ########### JSON helpers ############
    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.to_dict(), **kwargs)

    @classmethod
    def from_json(cls: Type[T], s: str) -> T:
        return cls.from_dict(json.loads(s))


class FigureObject(SerializableBase):
    """
    Common base for identifiable figure objects.
    - GUID `id` for client-side tracking (a clone gets a fresh one)
    - immutable `description` label
    """
    __slots__ = ("_id", "_description")

    def __init__(self, description: str = "figure") -> None:
        if not isinstance(description, str) or not description:
            raise ValueError("description must be a non-empty string")
        self._id: str = str(uuid.uuid4())
        self._description: str = description

    # ########################### cloning ###########################
    def clone(self: T, *, reset_id: bool = True) -> T:
        """
        Deep copy of this object; nothing is shared with the original.
        The copy receives a new `id` unless `reset_id` is False.
        """
        new_obj = _py_copy.deepcopy(self)
        if reset_id:
            new_obj._id = str(uuid.uuid4())  # type: ignore[attr-defined]
        return new_obj

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        obj = cls(description=data["description"])  # type: ignore[call-arg]
        if data.get("id"):
            obj.id = data["id"]  # type: ignore[attr-defined]
        return obj

    # ########################### properties ###########################
    @property
    def id(self) -> str:
        """Client-side GUID."""
        return self._id

    @id.setter
    def id(self, value: str) -> None:
        self._id = value

    @property
    def description(self) -> str:
        """Label written in front of the vertices."""
        return self._description

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(description='{self.description}', id='{self.id}')>"
