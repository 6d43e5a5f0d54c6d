from entity_agent.parsers.ddl import DDLParser, parse_ddl

__all__ = ["DDLParser", "parse_ddl"]
