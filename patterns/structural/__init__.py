"""
Structural pattern demos: Adapter, Bridge, Composite, Decorator, Facade,
Flyweight, Proxy.
"""
