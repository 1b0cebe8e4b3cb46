"""Chart builders."""

from .price_charts import make_sparkline

__all__ = ["make_sparkline"]
