from config_rules import ConfigValidationError, MappingStore, Validator

if __name__ == "__main__":
    config = MappingStore(
        {
            "app": {"id": "myapp", "name": "My App!", "env": "development"},
            "server": {"ip": "0.0.0.0", "port": "8080"},
            "db": {"host": "db.internal.example.com", "port": 70000, "user": "", "password": "x"},
        },
        separator=":",
    )

    validator = Validator()
    validator.add_rule("app:env", ["development", "production", "test"])
    validator.validate(config)
    print("Environment:", config.get("app:env"))

    validator.add_rule("server:ip", "ip")
    validator.add_rule("server:port", "port")
    validator.add_rule("db:host", "fqdn")
    validator.add_rule("db:port", "port")
    validator.add_rule("db:user", lambda x: 0 < len(x) < 16)
    validator.add_rule("db:password", lambda x: len(x) > 0)

    for error in validator.validate(config, silent=True):
        print("Invalid:", error)

    try:
        validator.validate(config)
    except ConfigValidationError as exc:
        print("Startup blocked:", exc.key, exc.claim)
