"""schema.org Recipe record layouts."""

from __future__ import annotations

from dataclasses import dataclass

from .model import Shape, shape_of
from .schema import FieldDef, RecordDef, absent_to_none, decode_record


# ---------------------------------------------------------------------------
# HowToStep
# ---------------------------------------------------------------------------

@dataclass
class HowToStep:
    """One instruction step: bare prose or a ``HowToStep`` object."""

    text: str | None
    name: str | None = None
    url: str | None = None

    @classmethod
    def from_text(cls, text: str) -> HowToStep:
        return cls(text=text)

    @classmethod
    def from_jsonld(cls, obj: dict) -> HowToStep:
        return cls(**absent_to_none(decode_record(obj, HOW_TO_STEP)))


HOW_TO_STEP = RecordDef("HowToStep", (
    FieldDef("text", multi=False),
    FieldDef("name", multi=False),
    FieldDef("url", multi=False),
))


def flatten_sections(raw):
    """Replace ``HowToSection`` objects by the steps they list.

    Returns a new list; *raw* itself is left untouched.
    """
    if shape_of(raw) is not Shape.SEQUENCE:
        return raw
    flat = []
    for item in raw:
        if isinstance(item, dict) and _has_type(item, "HowToSection"):
            steps = item.get("itemListElement", [])
            flat.extend(flatten_sections(steps) if isinstance(steps, list) else [steps])
        else:
            flat.append(item)
    return flat


def _has_type(obj: dict, type_name: str) -> bool:
    declared = obj.get("@type")
    if isinstance(declared, list):
        return type_name in declared
    return declared == type_name


# ---------------------------------------------------------------------------
# Person, AggregateRating, VideoObject
# ---------------------------------------------------------------------------

@dataclass
class Person:
    """An author: a bare name, a Person/Organization object, or an ``@id`` reference."""

    name: str | None = None
    url: str | None = None
    id: str | None = None

    @classmethod
    def from_text(cls, text: str) -> Person:
        return cls(name=text)

    @classmethod
    def from_jsonld(cls, obj: dict) -> Person:
        return cls(**absent_to_none(decode_record(obj, PERSON)))


PERSON = RecordDef("Person", (
    FieldDef("name", multi=False),
    FieldDef("url", multi=False),
    FieldDef("id", "@id", multi=False),
))


@dataclass
class AggregateRating:
    rating_value: float | None = None
    rating_count: int | None = None
    review_count: int | None = None
    best_rating: float | None = None
    worst_rating: float | None = None

    @classmethod
    def from_jsonld(cls, obj: dict) -> AggregateRating:
        return cls(**absent_to_none(decode_record(obj, AGGREGATE_RATING)))


AGGREGATE_RATING = RecordDef("AggregateRating", (
    FieldDef("rating_value", "ratingValue", target=float, multi=False),
    FieldDef("rating_count", "ratingCount", target=int, multi=False),
    FieldDef("review_count", "reviewCount", target=int, multi=False),
    FieldDef("best_rating", "bestRating", target=float, multi=False),
    FieldDef("worst_rating", "worstRating", target=float, multi=False),
))


@dataclass
class VideoObject:
    name: str | None = None
    description: str | None = None
    content_url: str | None = None
    embed_url: str | None = None
    thumbnail_url: str | None = None
    upload_date: str | None = None
    duration: str | None = None

    @classmethod
    def from_jsonld(cls, obj: dict) -> VideoObject:
        return cls(**absent_to_none(decode_record(obj, VIDEO_OBJECT)))


VIDEO_OBJECT = RecordDef("VideoObject", (
    FieldDef("name", multi=False),
    FieldDef("description", multi=False),
    FieldDef("content_url", "contentUrl", multi=False),
    FieldDef("embed_url", "embedUrl", multi=False),
    FieldDef("thumbnail_url", "thumbnailUrl", multi=False),
    FieldDef("upload_date", "uploadDate", multi=False),
    FieldDef("duration", multi=False),
))


# ---------------------------------------------------------------------------
# NutritionInfo
# ---------------------------------------------------------------------------

@dataclass
class NutritionInfo:
    calories: str | None = None
    fat_content: str | None = None
    saturated_fat_content: str | None = None
    carbohydrate_content: str | None = None
    sugar_content: str | None = None
    fiber_content: str | None = None
    protein_content: str | None = None
    sodium_content: str | None = None
    serving_size: str | None = None

    @classmethod
    def from_jsonld(cls, obj: dict) -> NutritionInfo:
        return cls(**absent_to_none(decode_record(obj, NUTRITION_INFO)))


NUTRITION_INFO = RecordDef("NutritionInfo", (
    FieldDef("calories", multi=False),
    FieldDef("fat_content", "fatContent", multi=False),
    FieldDef("saturated_fat_content", "saturatedFatContent", multi=False),
    FieldDef("carbohydrate_content", "carbohydrateContent", multi=False),
    FieldDef("sugar_content", "sugarContent", multi=False),
    FieldDef("fiber_content", "fiberContent", multi=False),
    FieldDef("protein_content", "proteinContent", multi=False),
    FieldDef("sodium_content", "sodiumContent", multi=False),
    FieldDef("serving_size", "servingSize", multi=False),
))


# ---------------------------------------------------------------------------
# Recipe
# ---------------------------------------------------------------------------

@dataclass
class Recipe:
    name: str | None = None
    description: str | None = None
    url: str | None = None
    images: list[str] | None = None
    authors: list[Person] | None = None
    recipe_yield: list[str] | None = None
    ingredients: list[str] | None = None
    instructions: list[HowToStep] | None = None
    categories: list[str] | None = None
    cuisines: list[str] | None = None
    keywords: list[str] | None = None
    prep_time: str | None = None
    cook_time: str | None = None
    total_time: str | None = None
    date_published: str | None = None
    rating: AggregateRating | None = None
    video: VideoObject | None = None
    nutrition: NutritionInfo | None = None

    @classmethod
    def from_jsonld(cls, obj: dict) -> Recipe:
        if "recipeInstructions" in obj:
            obj = {**obj, "recipeInstructions": flatten_sections(obj["recipeInstructions"])}
        return cls(**absent_to_none(decode_record(obj, RECIPE)))


RECIPE = RecordDef("Recipe", (
    FieldDef("name", multi=False),
    FieldDef("description", multi=False),
    FieldDef("url", multi=False),
    FieldDef("images", "image", path="url"),
    FieldDef("authors", "author", target=Person, builder=Person),
    FieldDef("recipe_yield", "recipeYield"),
    FieldDef("ingredients", "recipeIngredient"),
    FieldDef("instructions", "recipeInstructions", target=HowToStep, builder=HowToStep),
    FieldDef("categories", "recipeCategory"),
    FieldDef("cuisines", "recipeCuisine"),
    FieldDef("keywords"),
    FieldDef("prep_time", "prepTime", multi=False),
    FieldDef("cook_time", "cookTime", multi=False),
    FieldDef("total_time", "totalTime", multi=False),
    FieldDef("date_published", "datePublished", multi=False),
    FieldDef("rating", "aggregateRating", target=AggregateRating, multi=False),
    FieldDef("video", target=VideoObject, multi=False),
    FieldDef("nutrition", target=NutritionInfo, multi=False),
))
