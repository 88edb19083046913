"""
ParamType declarations.
"""

import json
import re

from click import ParamType
from humanfriendly import InvalidSize, parse_size


class ByteCount(ParamType):
    """
    Byte count type for command-line parameters. Accepts plain integers and
    human-friendly sizes like "8 MiB".
    """

    name = "bytes"

    def convert(self, value, param, ctx):
        """
        Convert size string into number of bytes.
        """
        if isinstance(value, int):
            result = value
        else:
            try:
                result = parse_size(value, binary=True)
            except InvalidSize as e:
                self.fail(f'"{value}" is not a valid size: {str(e)}', param, ctx)

        if result < 0:
            self.fail(f'"{value}" is negative', param, ctx)

        return result


class Ratio(ParamType):
    """
    Ratio type for command-line parameters. Accepts fractions like "0.75" and
    percentages like "75%".
    """

    name = "ratio"

    def convert(self, value, param, ctx):
        """
        Convert input value into float ratio.
        """
        if isinstance(value, float):
            return value

        text = str(value).strip()
        try:
            if text.endswith("%"):
                return float(text[:-1]) / 100
            return float(text)
        except ValueError:
            self.fail(f'"{value}" is not a valid ratio', param, ctx)


class JsonParamType(ParamType):
    """
    JsonParamType type for command-line parameter for JSON value.
    """

    name = "json"

    def convert(self, value, param, ctx):
        try:
            if re.fullmatch(
                r'\s*([\[{"].*|true|false|null|\d+(\.\d+)?)\s*',
                value,
                re.MULTILINE | re.DOTALL,
            ):
                return json.loads(value)
            return value.strip()
        except json.JSONDecodeError:
            self.fail(f'"{value}" is not a valid json value', param, ctx)
