"""Entity-component-system: entity ids, component storage and systems."""