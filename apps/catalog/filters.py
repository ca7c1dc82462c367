"""FilterSet definitions for catalog listings."""

from __future__ import annotations

import uuid

import django_filters  # type: ignore
from django.db.models import Q  # type: ignore

from .models import Product


class ProductFilterSet(django_filters.FilterSet):
    """Filters used by the product list: category, search, price range and stock."""

    category = django_filters.CharFilter(method="filter_category")
    search = django_filters.CharFilter(method="filter_search")
    min_price = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    max_price = django_filters.NumberFilter(field_name="price", lookup_expr="lte")
    in_stock = django_filters.BooleanFilter(method="filter_in_stock")
    is_featured = django_filters.BooleanFilter(field_name="is_featured")

    class Meta:
        model = Product
        fields = ["category", "is_featured"]

    def filter_category(self, queryset, name, value):  # type: ignore
        """Accept a category slug or id; includes products of subcategories."""
        from .models import Category

        try:
            lookup = Q(pk=uuid.UUID(str(value)))
        except ValueError:
            lookup = Q(slug=value)
        category = Category.objects.filter(lookup).first()
        if category is None:
            return queryset.none()
        return queryset.filter(category__in=category.get_descendants(include_self=True))

    def filter_search(self, queryset, name, value):  # type: ignore
        if not value:
            return queryset
        return queryset.filter(
            Q(name__icontains=value)
            | Q(description__icontains=value)
            | Q(short_description__icontains=value)
            | Q(sku__icontains=value)
        )

    def filter_in_stock(self, queryset, name, value):  # type: ignore
        if value:
            return queryset.in_stock()
        return queryset.filter(track_quantity=True, quantity__lte=0)
