# python
import logging

from config_rules import MappingStore, create_validator

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    store = MappingStore({"app_ip": "120.0.0.1", "app_port": 3000})
    validator = create_validator(store)

    validator.add_rule("app_ip", "ip")
    validator.add_rule("app_port", "port")

    # Raises ConfigValidationError on the first bad value.
    validator.validate()
    print("Config OK")
