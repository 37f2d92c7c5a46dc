"""Tests for jsonld_decoder.document."""

import json

import pytest

from jsonld_decoder import DocumentError, HowToStep, KeyPathResolutionError, Person, Recipe
from jsonld_decoder.document import RecipeJSONLDDecoder, find_node


class TestFindNode:
    def test_top_level(self):
        node = {"@type": "Recipe", "name": "A"}
        assert find_node(node) is node

    def test_type_list(self):
        node = {"@type": ["Recipe", "NewsArticle"], "name": "A"}
        assert find_node(node) is node

    def test_type_iri(self):
        node = {"@type": "https://schema.org/Recipe"}
        assert find_node(node) is node

    def test_graph(self):
        doc = {"@context": "https://schema.org", "@graph": [
            {"@type": "WebPage"},
            {"@type": "Recipe", "name": "B"},
        ]}
        assert find_node(doc)["name"] == "B"

    def test_top_level_list(self):
        doc = [{"@type": "Organization"}, {"@type": "Recipe", "name": "C"}]
        assert find_node(doc)["name"] == "C"

    def test_no_match(self):
        assert find_node({"@type": "WebPage"}) is None

    def test_other_type(self):
        node = {"@type": "HowToStep"}
        assert find_node([node], "HowToStep") is node


class TestRecipeJSONLDDecoder:
    def test_decode_bytes(self):
        recipe = RecipeJSONLDDecoder().decode(b'{"@type": "Recipe", "name": "Soup", "recipeYield": 0}')
        assert isinstance(recipe, Recipe)
        assert recipe.name == "Soup"
        assert recipe.recipe_yield == ["0"]

    def test_decode_str(self):
        recipe = RecipeJSONLDDecoder().decode('{"@type": "Recipe", "recipeInstructions": "Step1 Step2"}')
        assert recipe.instructions == [HowToStep(text="Step1 Step2")]

    def test_decode_graph(self):
        text = json.dumps({"@graph": [{"@type": "Recipe", "name": "G"}]})
        assert RecipeJSONLDDecoder().decode(text).name == "G"

    def test_invalid_json(self):
        with pytest.raises(DocumentError):
            RecipeJSONLDDecoder().decode("{not json")

    def test_invalid_utf8_bytes(self):
        with pytest.raises(DocumentError) as excinfo:
            RecipeJSONLDDecoder().decode(b'{"@type": "Recipe", "name": "Cr\xe8me"}')
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)

    def test_no_recipe(self):
        with pytest.raises(DocumentError):
            RecipeJSONLDDecoder().decode('{"@type": "WebPage"}')

    def test_schema_error_propagates(self):
        text = '{"@type": "Recipe", "image": {"@type": "ImageObject", "width": 10}}'
        with pytest.raises(KeyPathResolutionError) as excinfo:
            RecipeJSONLDDecoder().decode(text)
        assert excinfo.value.record == "Recipe"
        assert excinfo.value.field == "images"
        assert excinfo.value.source == "image"
        assert excinfo.value.key == "url"

    def test_custom_record_type(self):
        decoder = RecipeJSONLDDecoder(record_type=HowToStep, type_name="HowToStep")
        step = decoder.decode('[{"@type": "HowToStep", "text": "Stir"}]')
        assert step == HowToStep(text="Stir")

    def test_decode_object(self):
        recipe = RecipeJSONLDDecoder().decode_object({"@type": "Recipe", "author": ["Ada", {"name": "Bob"}]})
        assert recipe.authors == [Person(name="Ada"), Person(name="Bob")]


PAGE = """
<html><head>
<script type="application/ld+json">{"@type": "WebSite", "name": "Site"}</script>
<script type="application/ld+json">
{"@context": "https://schema.org", "@graph": [
  {"@type": "Recipe", "name": "Pancakes", "recipeIngredient": ["flour", "milk"]}
]}
</script>
</head><body></body></html>
"""


class TestDecodeHtml:
    def test_finds_recipe_block(self):
        recipe = RecipeJSONLDDecoder().decode_html(PAGE)
        assert recipe.name == "Pancakes"
        assert recipe.ingredients == ["flour", "milk"]

    def test_bytes_with_declared_charset(self):
        page = (
            '<html><head><meta charset="iso-8859-1">'
            '<script type="application/ld+json">{"@type": "Recipe", "name": "Cr'
            "\u00e8me br\u00fbl\u00e9e"
            '"}</script></head></html>'
        ).encode("latin-1")
        assert RecipeJSONLDDecoder().decode_html(page).name == "Cr\u00e8me br\u00fbl\u00e9e"

    def test_no_recipe_block(self):
        with pytest.raises(DocumentError):
            RecipeJSONLDDecoder().decode_html("<html><body><p>nothing</p></body></html>")
