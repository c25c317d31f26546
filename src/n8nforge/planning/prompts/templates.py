"""String constants for the workflow generation prompt.

Placeholders use ``{{name}}`` and are filled by ``loader.format_prompt``.
"""

# Complete generation prompt; section bodies are rendered separately
WORKFLOW_GENERATION_PROMPT = """
# n8n Workflow Generation System Prompt

{{background}}

## Current Task

Generate a {{complexity}} complexity n8n workflow implementation with the following requirements:

**Description**: {{description}}
**Required Features**: {{features}}
**Output Format**: {{output_format}}
**Use Task Manager**: {{use_task_manager}}

## Relevant Context

### Similar Workflows Found:
{{similar_workflows}}

### Recommended Nodes:
{{recommended_nodes}}

{{microservice_section}}

{{task_manager_section}}

## Implementation Requirements

1. **Architecture**:
   - {{architecture}}
   - {{orchestration}}
   - Implement proper error handling at each step
   - Add comprehensive logging nodes

2. **Features to Implement**:
{{feature_requirements}}

3. **Best Practices**:
   - Use Sticky Notes for documentation
   - Implement proper credential references
   - Add error handling and logging
   - Follow the patterns from similar workflows
   - Ensure all nodes are properly connected

4. **Output Requirements**:
   - Generate complete, valid JSON workflow(s)
   - Include all necessary node configurations
   - Ensure proper connections between nodes
   - Add helpful Sticky Notes for documentation

Generate the complete workflow implementation(s) now.
"""

SIMILAR_WORKFLOW_ENTRY = """
- **{{name}}** ({{percent}}% match)
  {{description}}...
"""

RECOMMENDED_NODE_ENTRY = """
- **{{name}}** ({{type}})
  {{description}}
"""

MICROSERVICE_SECTION = """
### Microservice Pattern Examples:
{{entries}}
"""

MICROSERVICE_EXAMPLE_ENTRY = """
#### {{name}}
- Webhook triggers for inter-service communication
- Modular design with single responsibility
- Clear input/output documentation
"""

TASK_MANAGER_SECTION = """
### Task Manager Integration:
{{entries}}
"""

TASK_MANAGER_EXAMPLE_ENTRY = """
#### {{name}}
- Task creation and monitoring
- Status updates via webhooks
- Centralized task orchestration
"""

FEATURE_REQUIREMENT_ENTRY = "   - {{feature}}: Full integration with all necessary nodes"

# Summary returned next to the prompt by generate_complete_workflow
GENERATION_INSTRUCTIONS = """
## Workflow Generation Ready

I've prepared a comprehensive context for generating your n8n workflow(s). The system has:

1. **Found {{workflow_count}} relevant workflows** matching your requirements
2. **Identified {{node_count}} relevant nodes** for the features you need
3. **Loaded {{microservice_count}} microservice examples** (if applicable)
4. **Loaded {{task_manager_count}} Task Manager examples** (if applicable)

### Next Steps:
1. Use the provided system prompt with an LLM to generate the workflow JSON(s)
2. The LLM will create {{target}}
3. Each workflow will follow the patterns and best practices from the examples

### Key Features to be Implemented:
{{feature_list}}

The generated workflow(s) will be production-ready with:
- Proper error handling
- Comprehensive logging
- Modular architecture
- Clear documentation via Sticky Notes
"""
