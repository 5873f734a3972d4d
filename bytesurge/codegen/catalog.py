from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Set

# A placeholder is "{name}"; anything in doubled braces ("{{}}", "{{name}}") is literal
PLACEHOLDER_RE = re.compile(r"(?<!\{)\{(\w+)\}(?!\})")

FUNCTION_NAMES = (
    "process_data", "handle_request", "validate_input", "parse_config",
    "connect_database", "serialize_response", "authenticate_user",
    "calculate_hash", "compress_file", "decrypt_message", "build_query",
    "format_output", "check_permissions", "load_settings", "save_cache",
)

VARIABLE_NAMES = (
    "result", "data", "config", "user", "response", "query", "buffer",
    "content", "payload", "status", "error", "value", "key", "item",
    "count", "index", "path", "url", "token", "session",
)

STRUCT_NAMES = (
    "Config", "User", "Request", "Response", "Database", "Cache",
    "Session", "Logger", "Parser", "Handler", "Client", "Server",
    "Message", "Event", "Task", "Job", "Queue", "State",
)

FEATURES = ("authentication", "caching", "validation", "logging")

RUST_TEMPLATES = (
    "fn {fn_name}() -> Result<{type}, Box<dyn std::error::Error>> {\n"
    '    let {var} = "{value}";\n'
    '    println!("Processing: {{}}", {var});\n'
    "    Ok({var}.to_string())\n"
    "}\n",
    "struct {struct_name} {\n"
    "    {field}: String,\n"
    "    {field2}: u32,\n"
    "    active: bool,\n"
    "}\n",
    "impl {struct_name} {\n"
    "    fn new({param}: &str) -> Self {\n"
    "        Self {\n"
    "            {field}: {param}.to_string(),\n"
    "            {field2}: 0,\n"
    "            active: true,\n"
    "        }\n"
    "    }\n"
    "}\n",
    "// TODO: implement {feature} functionality\n"
    "fn {fn_name}({param}: &str) -> Option<String> {\n"
    "    if {param}.is_empty() {\n"
    "        return None;\n"
    "    }\n"
    "    Some({param}.to_uppercase())\n"
    "}\n",
    "use std::collections::HashMap;\n\n"
    "fn {fn_name}() -> HashMap<String, {type}> {\n"
    "    let mut {var} = HashMap::new();\n"
    '    {var}.insert("key".to_string(), "{value}".to_string());\n'
    "    {var}\n"
    "}\n",
    "async fn {fn_name}({param}: &str) -> Result<String, reqwest::Error> {\n"
    "    let {var} = reqwest::get({param}).await?;\n"
    "    let {result} = {var}.text().await?;\n"
    "    Ok({result})\n"
    "}\n",
    "#[derive(Debug, Clone)]\n"
    "pub struct {struct_name} {\n"
    "    pub {field}: Vec<String>,\n"
    "    pub {field2}: Option<u32>,\n"
    "}\n",
)

PYTHON_TEMPLATES = (
    "def {fn_name}({param}):\n"
    "    # TODO: add {feature} checks\n"
    "    if not {param}:\n"
    "        return None\n"
    '    {result} = "{value}"\n'
    "    return {result}\n",
    "@dataclass\n"
    "class {struct_name}:\n"
    "    {field}: str\n"
    "    {field2}: int = 0\n"
    "    active: bool = True\n",
    "async def {fn_name}(session, {param}):\n"
    "    async with session.get({param}) as {var}:\n"
    "        {result} = await {var}.text()\n"
    "    return {result}\n",
)


@dataclass
class CodeTemplateCatalog:
    """Templates plus the value pool for every placeholder they use."""

    templates: Sequence[str]
    pools: Dict[str, Sequence[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.templates:
            raise ValueError("catalog needs at least one template")
        for name in sorted(self.tokens_in_catalog()):
            if not self.pools.get(name):
                raise ValueError(f"no values for placeholder {{{name}}}")

    @staticmethod
    def tokens(template: str) -> List[str]:
        """Distinct placeholder names in template, in first-seen order."""
        return list(dict.fromkeys(PLACEHOLDER_RE.findall(template)))

    def tokens_in_catalog(self) -> Set[str]:
        return {name for t in self.templates for name in self.tokens(t)}


def default_catalog() -> CodeTemplateCatalog:
    return CodeTemplateCatalog(
        templates=RUST_TEMPLATES + PYTHON_TEMPLATES,
        pools={
            "fn_name": FUNCTION_NAMES,
            "struct_name": STRUCT_NAMES,
            "var": VARIABLE_NAMES,
            "param": VARIABLE_NAMES,
            "field": VARIABLE_NAMES,
            "field2": VARIABLE_NAMES,
            "result": VARIABLE_NAMES,
            "type": ("String", "u32"),
            "value": ("default", "test_data"),
            "feature": FEATURES,
        },
    )
