"""Streamlit demo of search-as-you-type and the filtered results page."""
from __future__ import annotations

import streamlit as st

from application.use_cases.filter_results import ResultFilters, SortOrder, filter_options
from application.use_cases.search import search_products, suggest
from domain.interfaces import CatalogLoadError
from infrastructure.config import ContainerConfig, build_default_container


st.set_page_config(page_title="StoreSearch Demo")


@st.cache_resource
def _container():
    container = build_default_container(ContainerConfig.from_env())
    try:
        container.catalog.refresh(container.catalog_source)
    except CatalogLoadError as exc:
        st.error(f"Catalog could not be loaded: {exc}")
    return container


container = _container()
catalog = container.catalog.current()
st.title("StoreSearch Demo")
st.caption(f"{len(catalog)} products, fuzzy strategy: {container.fuzzy_matcher.name}")

query = st.text_input("Search", value="")
if not query.strip():
    st.info("Type to search.")
    st.stop()

st.subheader("Suggestions")
for result in suggest(query, catalog, ranker=container.ranker, limit=container.suggestion_limit):
    st.write(f"{result.entry.name} ({result.matched_field.value if result.matched_field else '-'})")

options = filter_options(catalog)
with st.sidebar:
    brands = st.multiselect("Brand", sorted(options["brands"]))
    genders = st.multiselect("Gender", sorted(options["genders"]))
    types = st.multiselect("Type", sorted(options["types"]))
    sort_by = st.selectbox("Sort by", [order.value for order in SortOrder])

st.subheader("Results")
results = search_products(
    query,
    catalog,
    ranker=container.ranker,
    filters=ResultFilters(brands=brands, genders=genders, types=types),
    sort_by=sort_by,
)
if not results:
    st.warning("No results.")
for result in results:
    st.write(
        {
            "id": result.entry.id,
            "name": result.entry.name,
            "brand": result.entry.brand,
            "price": result.entry.price,
            "score": round(result.score, 3),
            "matched_field": result.matched_field.value if result.matched_field else None,
        }
    )
