# Copyright 2025 DataStax Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License. You may obtain a copy of
# the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.

"""JSON codec used to decode response bodies and encode request bodies."""

from __future__ import annotations

from typing import Any, TypeVar

import msgspec

T = TypeVar("T")


class JsonCodec:
    """Lenient msgspec-backed JSON codec.

    Unknown object fields are ignored and absent fields fall back to the defaults
    declared on the target ``msgspec.Struct``, so additions to the remote API do
    not break older models. With ``strict=False`` values are coerced where msgspec
    allows it (e.g. ``"1"`` into an ``int`` field).
    """

    def __init__(self, *, strict: bool = False):
        self.strict = strict
        self._decoders: dict[Any, msgspec.json.Decoder] = {}
        self._encoder = msgspec.json.Encoder()

    def _decoder_for(self, type_: Any) -> msgspec.json.Decoder:
        decoder = self._decoders.get(type_)
        if decoder is None:
            decoder = msgspec.json.Decoder(type_, strict=self.strict)
            self._decoders[type_] = decoder
        return decoder

    def decode(self, text: str | bytes, type_: type[T] | Any) -> T:
        """Decode ``text`` into ``type_``.

        Raises:
            msgspec.DecodeError: If the text is not valid JSON.
            msgspec.ValidationError: If the JSON does not fit ``type_``.
        """
        return self._decoder_for(type_).decode(text)

    def encode(self, value: Any) -> bytes:
        return self._encoder.encode(value)


DEFAULT_CODEC = JsonCodec()
