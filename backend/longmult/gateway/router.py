"""
Gateway routes that serve the long multiplication diagram over HTTP
"""

from urllib.parse import unquote

from fastapi import APIRouter, Request, HTTPException, Depends
from fastapi.responses import Response

from longmult.config import get_settings
from longmult.errors import InvalidParametersError, OperandTooLargeError
from longmult.gateway.validators import parse_parameters
from longmult.logging import get_logger
from longmult.services.generator import build_multiplication
from longmult.services.renderer import render_to_string

logger = get_logger(__name__)
router = APIRouter()


def multiplication_response(raw_parameters: str, settings) -> Response:
    """Validate the comma-joined parameters and render the diagram"""
    try:
        request = parse_parameters(
            raw_parameters,
            default_output_type=settings.default_output_type,
            default_print_description=settings.default_print_description,
            max_digits=settings.max_operand_digits
        )
    except OperandTooLargeError as e:
        logger.warning("Rejected operand", operand=e.name, digits=e.digits, limit=e.limit)
        raise HTTPException(status_code=413, detail=str(e))
    except InvalidParametersError as e:
        logger.warning("Rejected parameters", parameters=raw_parameters, reason=str(e))
        raise HTTPException(status_code=400, detail=str(e))
    
    multiplication = build_multiplication(
        request.multiplier,
        request.multiplicand,
        request.print_description
    )
    content = render_to_string(multiplication)
    
    logger.info(
        "Rendered long multiplication",
        multiplier=request.multiplier,
        multiplicand=request.multiplicand,
        output_type=request.output_type,
        steps=multiplication.steps
    )
    
    return Response(
        content=content,
        media_type=f"text/{request.output_type};charset=UTF-8"
    )


@router.get("")
def multiply_query(request: Request, settings = Depends(get_settings)):
    """Handle `/multiply?5,79,plain,yes` style requests"""
    return multiplication_response(unquote(request.url.query), settings)


@router.get("/{parameters}")
def multiply(parameters: str, settings = Depends(get_settings)):
    """Handle `/multiply/5,79,plain,yes` style requests"""
    return multiplication_response(parameters, settings)
