from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from hotspot_src.core.errors import InvalidArguments

ParamsT = TypeVar("ParamsT", bound=BaseModel)


def parse_params(model: type[ParamsT], method: str, params: dict[str, Any]) -> ParamsT:
    """Validate method params, raising InvalidArguments (-32602) on failure."""
    try:
        return model.model_validate(params)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise InvalidArguments(f"Invalid params for {method}: {problems}") from e
