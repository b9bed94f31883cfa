from typing import Optional

import attrs


@attrs.define(frozen=True)
class UserEntity:
    """The acting user of a request; only the identity matters to use cases."""

    id: str = attrs.field(validator=attrs.validators.instance_of(str))
    email: Optional[str] = None
