# System-level instruction: sent as the `system_msg` to the LLM client so the
# model answers with a comment block only.
SYSTEM_MESSAGE = (
    "You write API documentation for Express applications. Reply only with a "
    "jsDoc comment block that can be pasted above the route, with no prose "
    "before or after it."
)

# Generation prompt: `{route_code}` receives the combined text, i.e. the
# selected route followed by the source of the service method it calls.
SWAGGER_PROMPT_TEMPLATE = (
    "Generate jsDoc format Swagger documentation for the following Express route:"
    "\n\n{route_code}"
)

# Fixed sample returned by the offline generator (`smartdoc --dry-run`).
CANNED_SWAGGER_DOC = """/**
 * POST /rest/addresses
 * @summary Create a new address
 * @tags Addresses
 * @param {Address} request.body - The address to create
 * @return {Address} 200 - Address - application/json
 * @return {object} 400 - Bad request response - application/json
 */"""

__all__ = [
    "SYSTEM_MESSAGE",
    "SWAGGER_PROMPT_TEMPLATE",
    "CANNED_SWAGGER_DOC",
]
