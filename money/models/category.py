"""Category kinds."""

import enum


class CategoryType(enum.StrEnum):
    """A resource holds money (bank, cash...); a tag classifies an expense."""

    resource = "resource"
    tag = "tag"
