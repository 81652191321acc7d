"""Fixed prompts and messages for the ordering transcript."""

WELCOME_MESSAGE = "Welcome to Starbuzz Coffee!"
BEVERAGE_PROMPT = "Please select your coffee:"
CONDIMENT_PROMPT = "Please select condiments (comma-separated):"

INVALID_BEVERAGE_MESSAGE = "Invalid coffee choice. Exiting..."
INVALID_CONDIMENTS_MESSAGE = "Invalid condiment choices. Exiting..."
INVALID_CONDIMENT_TEMPLATE = "Invalid condiment choice: {token}"

ORDER_TEMPLATE = "Your order: {description}"
TOTAL_TEMPLATE = "Total cost: {cost}"

CONDIMENT_SEPARATOR = ","
