# src/yaml_keypath/core/__init__.py
"""
Core do yaml-keypath.

Este pacote contém a implementação canônica e independente de adapters
da resolução de documentos hierárquicos em key-paths planos.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de dependências de runner, CI ou terminal
    - orientado a contratos explícitos

Componentes principais:
    - document → carregamento e deep-merge de documentos YAML/JSON
    - keypath  → flatten + resolução de variáveis `$(name)`
    - output   → filtro/reescrita de chaves e contrato de Emitter
    - pipeline → protocolos de Step, contexto de execução e tipos
    - engine   → planejamento (DAG) e execução fail-fast

Princípios fundamentais:
    - Nenhuma decisão silenciosa: todo comportamento é explícito e testado
    - Emissão é tudo-ou-nada: qualquer falha aborta a run antes do Emitter
    - Estado e efeitos colaterais são sempre rastreáveis

Limites explícitos:
    - Não avalia expressões, condicionais ou funções em substituições
    - Não resolve referências à frente (forward references)
    - Não depende de GitHub Actions ou de CLI

Este pacote existe como a fonte de verdade operacional do yaml-keypath.
"""
