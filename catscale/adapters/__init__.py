from catscale.adapters.normalize import coerce_categorical_values, coerce_render_values

__all__ = ["coerce_categorical_values", "coerce_render_values"]
