#!/usr/bin/env python3
"""
Demo of binding keys computed from annotated Python code.
"""

from dataclasses import dataclass
from typing import Annotated

from bindkeys import (
    AnnotationRef,
    DeclaredType,
    DependencySite,
    JavaDialect,
    KeyCanonicalizer,
    KeyExpressionEmitter,
    KeyFormat,
    Named,
    PythonDialect,
    field_sites,
    parameter_sites,
    qualifier,
    return_site,
    type_ref,
)


@qualifier
@dataclass(frozen=True)
class Region:
    name: str
    zone: int = 0


class Database:
    def __init__(self, host: Annotated[str, Named("db-host")], port: Annotated[int, Named("db-port")]):
        self.host = host
        self.port = port


@dataclass
class Settings:
    primary: Annotated[Database, Region("eu-west", 2)]
    replicas: list[Database]


def plugin_names() -> Annotated[str, Named("plugins")]:
    return "audit"


def main():
    keys = KeyCanonicalizer()
    python_emitter = KeyExpressionEmitter(PythonDialect())
    legacy_keys = KeyCanonicalizer(KeyFormat.legacy())
    java_emitter = KeyExpressionEmitter(JavaDialect(), KeyFormat.legacy())

    print("Constructor parameters:")
    for site in parameter_sites(Database):
        print(f"  {site}")
        print(f"    key:        {keys.provider_key(site)}")
        print(f"    expression: {python_emitter.provider_key_expression(site)}")

    print("\nDataclass fields:")
    for site in field_sites(Settings):
        print(f"  {site}")
        print(f"    key:        {keys.provider_key(site)}")

    print("\nSet contribution:")
    provided = return_site(plugin_names)
    print(f"  key:        {keys.element_key(provided)}")
    print(f"  expression: {python_emitter.element_key_expression(provided)}")

    print("\nJava provider method:")
    javax_named = AnnotationRef(
        DeclaredType.of("javax.inject.Named"), (("value", "plugins"),), qualifying=True
    )
    method = DependencySite.method("providePlugins", DeclaredType.of("java.lang.String"), [javax_named])
    print(f"  key:        {legacy_keys.element_key(method)}")
    print(f"  expression: {java_emitter.element_key_expression(method)}")

    print("\nMembers injection:")
    print(f"  key:        {keys.raw_members_key(type_ref(Database))}")
    print(f"  expression: {python_emitter.members_key_expression(type_ref(Database))}")
    entry = DeclaredType.of("java.util.Map$Entry", DeclaredType.of("java.lang.String"))
    print(f"  java:       {java_emitter.members_key_expression(entry)}")


if __name__ == "__main__":
    main()
