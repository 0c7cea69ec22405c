"""
Basic options: building, querying, transforming and extracting optional values.

Run: python examples/basic_options.py
"""
from optio import (
    Some,
    NONE,
    Matcher,
    from_nullable,
    is_some,
    map,
    filter,
    zip,
    and_then,
    or_,
    xor,
    unwrap_or,
    unwrap_or_else,
    expect,
    match,
    get_logger,
)


def parse_port(raw: str):
    return Some(int(raw)) if raw.isdigit() else NONE


def main():
    env = {"HOST": "localhost", "PORT": "8080"}

    # Bridge from dict lookups that return Python None
    host = from_nullable(env.get("HOST"))
    port = parse_port(env.get("PORT", ""))
    print("host present:", is_some(host))

    # Transform and validate
    valid_port = filter(port, lambda p: 0 < p < 65536)
    print("port + 1:", map(valid_port, lambda p: p + 1))
    print("address:", zip(host, valid_port))

    # Logical combinators
    print("or_:", or_(NONE, Some("fallback")))
    print("xor:", xor(Some(1), Some(2)))
    print("and_then:", and_then(Some(2), lambda x: x ** 3))

    # Extraction
    print("timeout:", unwrap_or(from_nullable(env.get("TIMEOUT")), 30))
    print("user:", unwrap_or_else(from_nullable(env.get("USER")), lambda: "anonymous"))
    print(match(valid_port, Matcher(some=lambda p: f"listening on {p}", none=lambda: "no port")))

    # Absence violations are logged at DEBUG before raising
    get_logger().set_level("DEBUG")
    try:
        expect(from_nullable(env.get("SECRET")), "SECRET is required", KeyError)
    except KeyError as e:
        print("caught:", e)


if __name__ == "__main__":
    main()
