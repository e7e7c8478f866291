"""
Creational pattern demos: Abstract Factory, Builder, Factory, Object Pool,
Prototype, Singleton.
"""
