"""Simple string templates for the static Spring Boot scaffolding (Jinja2-free)."""
from typing import List

from umlgen.generators.spring_gen.naming import resource_path
from umlgen.generators.spring_gen.types import GeneratorOptions


def render_pom_xml(options: GeneratorOptions) -> str:
    """Generate pom.xml content."""
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0"
         xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
         xsi:schemaLocation="http://maven.apache.org/POM/4.0.0 https://maven.apache.org/xsd/maven-4.0.0.xsd">
    <modelVersion>4.0.0</modelVersion>
    <parent>
        <groupId>org.springframework.boot</groupId>
        <artifactId>spring-boot-starter-parent</artifactId>
        <version>{options.spring_boot_version}</version>
        <relativePath/>
    </parent>

    <groupId>{options.package_name}</groupId>
    <artifactId>{options.project_name}</artifactId>
    <version>0.0.1-SNAPSHOT</version>
    <name>{options.project_name}</name>
    <description>Generated Spring Boot project</description>

    <properties>
        <java.version>{options.java_version}</java.version>
    </properties>

    <dependencies>
        <dependency>
            <groupId>org.springframework.boot</groupId>
            <artifactId>spring-boot-starter-web</artifactId>
        </dependency>
        <dependency>
            <groupId>org.springframework.boot</groupId>
            <artifactId>spring-boot-starter-data-jpa</artifactId>
        </dependency>
        <dependency>
            <groupId>com.h2database</groupId>
            <artifactId>h2</artifactId>
            <scope>runtime</scope>
        </dependency>
        <dependency>
            <groupId>org.projectlombok</groupId>
            <artifactId>lombok</artifactId>
            <optional>true</optional>
        </dependency>
        <dependency>
            <groupId>org.modelmapper</groupId>
            <artifactId>modelmapper</artifactId>
            <version>3.1.1</version>
        </dependency>
        <dependency>
            <groupId>org.springframework.boot</groupId>
            <artifactId>spring-boot-starter-test</artifactId>
            <scope>test</scope>
        </dependency>
    </dependencies>

    <build>
        <plugins>
            <plugin>
                <groupId>org.springframework.boot</groupId>
                <artifactId>spring-boot-maven-plugin</artifactId>
                <configuration>
                    <excludes>
                        <exclude>
                            <groupId>org.projectlombok</groupId>
                            <artifactId>lombok</artifactId>
                        </exclude>
                    </excludes>
                </configuration>
            </plugin>
        </plugins>
    </build>
</project>
"""


def render_application_properties(options: GeneratorOptions) -> str:
    """Generate src/main/resources/application.properties content."""
    return f"""spring.application.name={options.project_name}

# H2 in-memory database
spring.datasource.url=jdbc:h2:mem:testdb
spring.datasource.driver-class-name=org.h2.Driver
spring.datasource.username=sa
spring.datasource.password=

# JPA / Hibernate
spring.jpa.database-platform=org.hibernate.dialect.H2Dialect
spring.jpa.hibernate.ddl-auto=create-drop
spring.jpa.show-sql=true
spring.jpa.defer-datasource-initialization=true
spring.jpa.open-in-view=false

# H2 console
spring.h2.console.enabled=true
spring.h2.console.path=/h2-console

server.port=8080

logging.level.org.springframework.web=INFO
logging.level.org.hibernate=INFO
logging.level.{options.package_name}=DEBUG

# Jackson
spring.jackson.serialization.fail-on-empty-beans=false
spring.jackson.serialization.fail-on-self-references=false
"""


def render_application_java(options: GeneratorOptions) -> str:
    """Generate the Spring Boot entry point."""
    return f"""package {options.package_name};

import org.springframework.boot.SpringApplication;
import org.springframework.boot.autoconfigure.SpringBootApplication;

@SpringBootApplication
public class Application {{
    public static void main(String[] args) {{
        SpringApplication.run(Application.class, args);
    }}
}}
"""


def render_model_mapper_config(options: GeneratorOptions) -> str:
    """Generate config/ModelMapperConfig.java content."""
    return f"""package {options.package_name}.config;

import org.modelmapper.ModelMapper;
import org.springframework.context.annotation.Bean;
import org.springframework.context.annotation.Configuration;

@Configuration
public class ModelMapperConfig {{

    @Bean
    public ModelMapper modelMapper() {{
        return new ModelMapper();
    }}
}}
"""


def render_not_found_exception(options: GeneratorOptions) -> str:
    """Generate exception/ResourceNotFoundException.java content."""
    return f"""package {options.package_name}.exception;

public class ResourceNotFoundException extends RuntimeException {{
    public ResourceNotFoundException(String message) {{
        super(message);
    }}
}}
"""


def render_readme(options: GeneratorOptions, class_names: List[str]) -> str:
    """Generate README.md content."""
    lines = [
        f"# {options.project_name}",
        "",
        "Spring Boot backend generated from a class diagram.",
        "",
        "## Running",
        "",
        "```bash",
        "mvn spring-boot:run",
        "```",
        "",
        f"The API listens on {options.base_url}; the H2 console is at `/h2-console`.",
        "",
        "## Resources",
        "",
    ]
    for class_name in class_names:
        lines.append(f"- `{class_name}`: `/api/{resource_path(class_name)}`")
    lines.extend([
        "",
        "Import `postman-collection.json` and `postman-environment.json` into Postman to try the endpoints.",
        "",
    ])
    return "\n".join(lines)
