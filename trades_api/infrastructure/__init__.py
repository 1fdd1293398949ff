"""
Infrastructure layer package.

Concrete implementations (adapters) of the ports defined in the domain
layer: the relational database and the Event Grid topic.
"""
