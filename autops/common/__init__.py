"""Shared building blocks: errors, identifiers, entities, tags, statuses, versioned sources and comparator lists."""