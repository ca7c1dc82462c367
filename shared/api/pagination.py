"""Page-number pagination producing the storefront's ``pagination`` block."""

from __future__ import annotations

from rest_framework.pagination import PageNumberPagination  # type: ignore
from rest_framework.response import Response  # type: ignore


class StandardPagination(PageNumberPagination):
    page_size = 12
    page_size_query_param = "limit"
    max_page_size = 100

    def get_paginated_response(self, data):  # type: ignore
        page = self.page
        return Response(
            {
                "items": data,
                "pagination": {
                    "current_page": page.number,
                    "total_pages": page.paginator.num_pages,
                    "total_items": page.paginator.count,
                    "items_per_page": page.paginator.per_page,
                    "has_next_page": page.has_next(),
                    "has_prev_page": page.has_previous(),
                },
            }
        )

    def get_paginated_response_schema(self, schema):  # type: ignore
        return {
            "type": "object",
            "properties": {
                "items": schema,
                "pagination": {"type": "object"},
            },
        }
