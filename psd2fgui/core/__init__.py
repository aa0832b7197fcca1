"""GUI-agnostic conversion core: models, content store, translator and emitter."""
