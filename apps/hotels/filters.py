"""FilterSet for hotel listings."""

from __future__ import annotations

import django_filters  # type: ignore
from django.db.models import Q  # type: ignore

from .models import Hotel


class HotelFilterSet(django_filters.FilterSet):
    search = django_filters.CharFilter(method="filter_search")
    city = django_filters.CharFilter(field_name="city", lookup_expr="icontains")
    country = django_filters.CharFilter(field_name="country", lookup_expr="icontains")
    special_offer = django_filters.BooleanFilter(field_name="special_offer")
    featured = django_filters.BooleanFilter(field_name="featured")
    popular = django_filters.BooleanFilter(field_name="popular")

    class Meta:
        model = Hotel
        fields = ["city", "country", "special_offer", "featured", "popular"]

    def filter_search(self, queryset, name, value):  # type: ignore
        if not value:
            return queryset
        return queryset.filter(
            Q(name__icontains=value) | Q(location__icontains=value) | Q(description__icontains=value)
        )
