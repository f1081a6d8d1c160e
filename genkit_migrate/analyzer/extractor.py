"""
Construct Extractor

Parses a Python source file and extracts the Genkit constructs it
declares: flows defined with ``define_flow`` and model references
obtained through ``model``.
"""

import ast
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from genkit_migrate.core.exceptions import ProjectIOError, SourceParseError
from genkit_migrate.models.config import AnalyzerConfig
from genkit_migrate.models.project import Flow, Model, Position, SourceFile
from genkit_migrate.utils.files import module_name_for, relative_posix
from genkit_migrate.utils.logging import get_logger


# Import paths containing any of these mark a file as framework-relevant
FRAMEWORK_IMPORT_MARKERS = ("genkit", "genkit.ai", "genkit.plugins")

FLOW = "flow"
MODEL = "model"


@dataclass(frozen=True)
class CallShape:
    """A recognized call pattern: ``<expr>.<selector>("<literal>", ...)``."""
    kind: str
    selector: str
    min_args: int


CALL_SHAPES: Tuple[CallShape, ...] = (
    CallShape(kind=FLOW, selector="define_flow", min_args=2),
    CallShape(kind=MODEL, selector="model", min_args=1),
)

# Ordered substring tests; the first match decides the provider
PROVIDER_PATTERNS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("googleai/", "vertexai/"), "gcp"),
    (("openai/", "gpt-"), "openai"),
    (("anthropic/", "claude-"), "anthropic"),
    (("ollama/",), "ollama"),
    (("bedrock/", "amazon.", "anthropic."), "aws"),
)

UNKNOWN_PROVIDER = "unknown"


def classify_provider(model_name: str) -> str:
    """
    Classify a model identifier by the vendor prefix it carries.
    
    Args:
        model_name: Model identifier, e.g. ``"googleai/gemini-1.5-pro"``
    
    Returns:
        Provider tag (``gcp``, ``openai``, ``anthropic``, ``ollama``,
        ``aws``) or ``unknown``
    """
    for markers, provider in PROVIDER_PATTERNS:
        if any(marker in model_name for marker in markers):
            return provider
    return UNKNOWN_PROVIDER


def _string_literal(node: ast.AST) -> Optional[str]:
    if isinstance(node, ast.Constant) and isinstance(node.value, str):
        return node.value
    return None


def _describe_type(node: ast.AST) -> Optional[str]:
    literal = _string_literal(node)
    if literal is not None:
        return literal
    if isinstance(node, (ast.Name, ast.Attribute, ast.Subscript)):
        return ast.unparse(node)
    return None


class ConstructVisitor(ast.NodeVisitor):
    """Collects flows and models from every call expression, in traversal order."""
    
    def __init__(self, filename: str, shapes: Tuple[CallShape, ...] = CALL_SHAPES):
        self.filename = filename
        self._shapes: Dict[str, CallShape] = {shape.selector: shape for shape in shapes}
        self.flows: List[Flow] = []
        self.models: List[Model] = []
    
    def visit_Call(self, node: ast.Call) -> None:
        shape = self.match(node)
        if shape is not None:
            name = _string_literal(node.args[0])
            position = Position(
                filename=self.filename,
                line=node.lineno,
                column=node.col_offset + 1
            )
            if shape.kind == FLOW:
                self.flows.append(self._build_flow(node, name, position))
            elif shape.kind == MODEL:
                self.models.append(Model(
                    name=name,
                    provider=classify_provider(name),
                    position=position
                ))
        
        # Calls nested in the arguments are visited after their parent
        self.generic_visit(node)
    
    def match(self, node: ast.Call) -> Optional[CallShape]:
        """Return the call shape ``node`` matches, if any."""
        if not isinstance(node.func, ast.Attribute):
            return None
        
        shape = self._shapes.get(node.func.attr)
        if shape is None or len(node.args) < shape.min_args:
            return None
        
        # Dynamic names cannot be resolved statically
        if _string_literal(node.args[0]) is None:
            return None
        
        return shape
    
    def _build_flow(self, node: ast.Call, name: str, position: Position) -> Flow:
        keywords = {kw.arg: kw.value for kw in node.keywords if kw.arg}
        
        input_type = output_type = description = None
        if "input_schema" in keywords:
            input_type = _describe_type(keywords["input_schema"])
        if "output_schema" in keywords:
            output_type = _describe_type(keywords["output_schema"])
        if "description" in keywords:
            description = _string_literal(keywords["description"])
        
        return Flow(
            name=name,
            position=position,
            input_type=input_type,
            output_type=output_type,
            description=description
        )


class ConstructExtractor:
    """Extracts Genkit constructs from individual source files."""
    
    def __init__(self, config: Optional[AnalyzerConfig] = None):
        self.config = config or AnalyzerConfig()
        self.logger = get_logger("analyzer.extractor")
    
    def extract(self, file_path: Union[str, Path], project_root: Union[str, Path]) -> Optional[SourceFile]:
        """
        Extract the framework constructs of one file.
        
        Args:
            file_path: Absolute path of the source file
            project_root: Project root, used to derive the module name
        
        Returns:
            Populated SourceFile, or None if the file does not import Genkit
        
        Raises:
            SourceParseError: If the file is not valid Python
            ProjectIOError: If the file cannot be read
        """
        file_path = Path(file_path)
        tree = self.parse_file(file_path)
        
        imports = self.extract_imports(tree)
        if not self.is_framework_relevant(imports):
            self.logger.debug(f"Skipping {file_path}: no Genkit imports")
            return None
        
        visitor = ConstructVisitor(str(file_path))
        visitor.visit(tree)
        
        return SourceFile(
            path=str(file_path),
            package_name=module_name_for(relative_posix(file_path, project_root)),
            imports=imports,
            flows=visitor.flows,
            models=visitor.models,
            has_genkit=True
        )
    
    def parse_file(self, file_path: Path) -> ast.Module:
        """Parse a file into a syntax tree with position information."""
        try:
            source = file_path.read_bytes()
        except OSError as e:
            raise ProjectIOError(f"Could not read {file_path}: {e}", path=str(file_path)) from e
        
        try:
            return ast.parse(source, filename=str(file_path))
        except SyntaxError as e:
            raise SourceParseError(
                f"Syntax error in {file_path}:{e.lineno}: {e.msg}",
                file_path=str(file_path),
                line=e.lineno
            ) from e
        except ValueError as e:
            # Null bytes and undecodable source
            raise SourceParseError(
                f"Could not parse {file_path}: {e}",
                file_path=str(file_path)
            ) from e
    
    def extract_imports(self, tree: ast.AST) -> List[str]:
        """
        Return the imported module path of every import statement.
        
        ``from . import x`` style imports keep their leading dots.
        Imports are returned in source order.
        """
        nodes = [
            node for node in ast.walk(tree)
            if isinstance(node, (ast.Import, ast.ImportFrom))
        ]
        nodes.sort(key=lambda node: (node.lineno, node.col_offset))
        
        imports = []
        for node in nodes:
            if isinstance(node, ast.Import):
                imports.extend(alias.name for alias in node.names)
            else:
                imports.append("." * node.level + (node.module or ""))
        return imports
    
    def is_framework_relevant(self, imports: List[str]) -> bool:
        return any(
            marker in import_path
            for import_path in imports
            for marker in FRAMEWORK_IMPORT_MARKERS
        )
