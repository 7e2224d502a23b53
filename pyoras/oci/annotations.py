from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import GetCoreSchemaHandler, StrictStr
from pydantic_core import core_schema


class Annotations(Mapping[str, str]):
    """A read-only snapshot of string annotations

    ref: https://github.com/opencontainers/image-spec/blob/main/annotations.md
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, str] | None = None):
        self._data = dict(data or {})

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __repr__(self):
        return f"{self.__class__.__name__}({self._data!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            handler.generate_schema(dict[StrictStr, StrictStr]),
            serialization=core_schema.plain_serializer_function_ser_schema(
                dict,
                return_schema=core_schema.dict_schema(
                    core_schema.str_schema(), core_schema.str_schema()
                ),
            ),
        )
