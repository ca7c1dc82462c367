"""FilterSet for the public gallery."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import GalleryItem


class GalleryFilterSet(django_filters.FilterSet):
    category = django_filters.CharFilter(method="filter_category")
    featured = django_filters.BooleanFilter(field_name="featured")
    status = django_filters.ChoiceFilter(choices=GalleryItem.Status.choices)

    class Meta:
        model = GalleryItem
        fields = ["category", "featured", "status"]

    def filter_category(self, queryset, name, value):  # type: ignore
        if not value or value == "all":
            return queryset
        return queryset.filter(category=value)
