"""British English Gobstones vocabulary: the Color type is spelled "Colour"."""

from gbstranslator.types import LocaleDefinition

EN_GB: LocaleDefinition = {
    "extends": "en",
    "GBS_TYPE_COLOR": "Colour",
    "GBS_EXPRESSION_MINCOLOR": "minColor",
    "GBS_EXPRESSION_MAXCOLOR": "maxColor",
}
