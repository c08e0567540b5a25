"""Lookup tables that drive README synthesis."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple


class Language(Enum):
    """Primary-language variants with dedicated README copy."""

    JAVASCRIPT = "javascript"
    PYTHON = "python"
    JAVA = "java"
    GO = "go"
    RUST = "rust"
    OTHER = "other"

    @classmethod
    def from_name(cls, value: Optional[str]) -> "Language":
        if not value:
            return cls.OTHER
        return _LANGUAGE_ALIASES.get(value.strip().lower(), cls.OTHER)


_LANGUAGE_ALIASES: Dict[str, Language] = {
    "javascript": Language.JAVASCRIPT,
    "typescript": Language.JAVASCRIPT,
    "python": Language.PYTHON,
    "java": Language.JAVA,
    "go": Language.GO,
    "rust": Language.RUST,
}


class Ecosystem(Enum):
    """Package ecosystems recognised from a manifest file, in priority order."""

    NODE = "package.json"
    PYTHON = "requirements.txt"
    RUBY = "Gemfile"
    RUST = "Cargo.toml"
    GO = "go.mod"
    UNKNOWN = ""

    @property
    def manifest(self) -> str:
        return self.value


ECOSYSTEM_PRIORITY: Tuple[Ecosystem, ...] = (
    Ecosystem.NODE,
    Ecosystem.PYTHON,
    Ecosystem.RUBY,
    Ecosystem.RUST,
    Ecosystem.GO,
)

DESCRIPTION_FALLBACK = "A modern and efficient project built with cutting-edge technologies."

BADGE_STYLE = "flat-square"

GENERAL_FEATURES: Tuple[str, ...] = (
    "🎯 **Clean and Modern Design** - Built with best practices in mind",
    "⚡ **High Performance** - Optimized for speed and efficiency",
    "🔧 **Easy to Use** - Simple setup and intuitive interface",
    "📱 **Responsive** - Works seamlessly across all devices",
)

LANGUAGE_FEATURES: Dict[Language, Optional[str]] = {
    Language.JAVASCRIPT: "🌐 **Modern JavaScript/TypeScript** - Leveraging latest ES features",
    Language.PYTHON: "🐍 **Python Powered** - Clean and readable Python code",
    Language.JAVA: "☕ **Java Excellence** - Robust and scalable Java architecture",
    Language.GO: "🚀 **Go Performance** - Lightning-fast and concurrent",
    Language.RUST: "🦀 **Rust Safety** - Memory-safe and blazingly fast",
    Language.OTHER: None,
}

TESTED_FEATURE = "🧪 **Well Tested** - Comprehensive test coverage"
DOCKER_FEATURE = "🐳 **Docker Ready** - Containerized for easy deployment"

PREREQUISITES: Dict[Ecosystem, Tuple[str, ...]] = {
    Ecosystem.NODE: (
        "- [Node.js](https://nodejs.org/) (v14 or higher)",
        "- [npm](https://www.npmjs.com/) or [yarn](https://yarnpkg.com/)",
    ),
    Ecosystem.PYTHON: (
        "- [Python](https://python.org/) (v3.7 or higher)",
        "- [pip](https://pip.pypa.io/en/stable/)",
    ),
    Ecosystem.RUBY: (
        "- [Ruby](https://ruby-lang.org/) (v2.7 or higher)",
        "- [Bundler](https://bundler.io/)",
    ),
    Ecosystem.RUST: (
        "- [Rust](https://rustup.rs/) (latest stable)",
        "- [Cargo](https://doc.rust-lang.org/cargo/)",
    ),
    Ecosystem.GO: ("- [Go](https://golang.org/) (v1.16 or higher)",),
}

GENERIC_PREREQUISITE = (
    "- [{runtime}](https://example.com) - Check project documentation for specific version requirements"
)

CLONE_STEPS: Tuple[str, ...] = (
    "1. Clone the repository:",
    "   ```bash",
    "   git clone <repository-url>",
    "   cd <repository-name>",
    "   ```",
    "",
)

INSTALL_STEPS: Dict[Ecosystem, Tuple[str, ...]] = {
    Ecosystem.NODE: (
        "2. Install dependencies:",
        "   ```bash",
        "   npm install",
        "   # or",
        "   yarn install",
        "   ```",
        "",
        "3. Start the application:",
        "   ```bash",
        "   npm start",
        "   # or",
        "   yarn start",
        "   ```",
    ),
    Ecosystem.PYTHON: (
        "2. Create a virtual environment:",
        "   ```bash",
        "   python -m venv venv",
        "   source venv/bin/activate  # On Windows: venv\\Scripts\\activate",
        "   ```",
        "",
        "3. Install dependencies:",
        "   ```bash",
        "   pip install -r requirements.txt",
        "   ```",
        "",
        "4. Run the application:",
        "   ```bash",
        "   python main.py",
        "   ```",
    ),
    Ecosystem.RUBY: (
        "2. Install dependencies:",
        "   ```bash",
        "   bundle install",
        "   ```",
        "",
        "3. Run the application:",
        "   ```bash",
        "   bundle exec ruby main.rb",
        "   ```",
    ),
    Ecosystem.RUST: (
        "2. Build and run:",
        "   ```bash",
        "   cargo run",
        "   ```",
        "",
        "   Or build for release:",
        "   ```bash",
        "   cargo build --release",
        "   ```",
    ),
    Ecosystem.GO: (
        "2. Install dependencies:",
        "   ```bash",
        "   go mod tidy",
        "   ```",
        "",
        "3. Run the application:",
        "   ```bash",
        "   go run main.go",
        "   ```",
    ),
    Ecosystem.UNKNOWN: (
        "2. Follow the setup instructions specific to this project",
        "3. Refer to the project documentation for detailed installation steps",
    ),
}

USAGE_INTRO = "Here are some basic usage examples:"

# (fence tag, snippet lines); OTHER renders as a plain paragraph.
USAGE_EXAMPLES: Dict[Language, Tuple[Optional[str], Tuple[str, ...]]] = {
    Language.JAVASCRIPT: (
        "javascript",
        (
            'import { ProjectName } from "./src/index.js";',
            "",
            "const project = new ProjectName();",
            "project.initialize();",
        ),
    ),
    Language.PYTHON: (
        "python",
        (
            "from project_name import ProjectName",
            "",
            "project = ProjectName()",
            "project.run()",
        ),
    ),
    Language.JAVA: (
        "java",
        (
            "public class Main {",
            "    public static void main(String[] args) {",
            "        ProjectName project = new ProjectName();",
            "        project.start();",
            "    }",
            "}",
        ),
    ),
    Language.GO: (
        "go",
        (
            "package main",
            "",
            'import "fmt"',
            "",
            "func main() {",
            '    fmt.Println("Hello from project!")',
            "}",
        ),
    ),
    Language.RUST: (
        "rust",
        (
            "use project_name::ProjectName;",
            "",
            "fn main() {",
            "    let project = ProjectName::new();",
            "    project.run();",
            "}",
        ),
    ),
    Language.OTHER: (
        None,
        (
            "Please refer to the project documentation for specific usage instructions.",
            "Each feature comes with detailed examples and API documentation.",
        ),
    ),
}

# Extension groups in output order; a group is emitted once if any extension matches.
TECH_STACK_EXTENSIONS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("ts", "tsx"), "- **TypeScript** - Type-safe JavaScript"),
    (("js", "jsx"), "- **JavaScript** - Dynamic programming language"),
    (("py",), "- **Python** - High-level programming language"),
    (("java",), "- **Java** - Object-oriented programming language"),
    (("go",), "- **Go** - Fast and efficient language"),
    (("rs",), "- **Rust** - Systems programming language"),
)
NODE_RUNTIME_ENTRY = "- **Node.js** - JavaScript runtime environment"
DOCKER_ENTRY = "- **Docker** - Containerization platform"
TECH_STACK_FALLBACK = "- Modern development tools and practices"

CONTRIBUTING_STEPS: Tuple[str, ...] = (
    "1. Fork the Project",
    "2. Create your Feature Branch (`git checkout -b feature/AmazingFeature`)",
    "3. Commit your Changes (`git commit -m 'Add some AmazingFeature'`)",
    "4. Push to the Branch (`git push origin feature/AmazingFeature`)",
    "5. Open a Pull Request",
)

CONTRIBUTING_INTRO = (
    "Contributions are what make the open source community such an amazing place to learn, "
    "inspire, and create. Any contributions you make are **greatly appreciated**."
)

LICENSED_TEMPLATE = (
    "This project is licensed under the {name} License - see the [LICENSE](LICENSE) file for details."
)
UNLICENSED_TEXT = "This project is currently unlicensed. Consider adding a license to protect your work."

ACKNOWLEDGMENTS: Tuple[str, ...] = (
    "- Thanks to all contributors who have helped shape this project",
    "- Inspired by the open source community",
    "- Built with ❤️ and modern development practices",
)

CALL_TO_ACTION = "⭐ Don't forget to give the project a star if you found it helpful!"

SECTION_TITLES: Dict[str, str] = {
    "features": "## ✨ Features",
    "getting_started": "## 🚀 Getting Started",
    "usage": "## 📖 Usage",
    "built_with": "## 🛠️ Built With",
    "stats": "## 📊 Project Stats",
    "contributing": "## 🤝 Contributing",
    "license": "## 📄 License",
    "author": "## 👤 Author",
    "acknowledgments": "## 🙏 Acknowledgments",
}


__all__ = [
    "ACKNOWLEDGMENTS",
    "BADGE_STYLE",
    "CALL_TO_ACTION",
    "CLONE_STEPS",
    "CONTRIBUTING_INTRO",
    "CONTRIBUTING_STEPS",
    "DESCRIPTION_FALLBACK",
    "DOCKER_ENTRY",
    "DOCKER_FEATURE",
    "ECOSYSTEM_PRIORITY",
    "Ecosystem",
    "GENERAL_FEATURES",
    "GENERIC_PREREQUISITE",
    "INSTALL_STEPS",
    "LANGUAGE_FEATURES",
    "LICENSED_TEMPLATE",
    "Language",
    "NODE_RUNTIME_ENTRY",
    "PREREQUISITES",
    "SECTION_TITLES",
    "TECH_STACK_EXTENSIONS",
    "TECH_STACK_FALLBACK",
    "TESTED_FEATURE",
    "UNLICENSED_TEXT",
    "USAGE_EXAMPLES",
    "USAGE_INTRO",
]
