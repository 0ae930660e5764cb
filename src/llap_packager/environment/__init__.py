"""
Colaboradores externos do LLAP Packager.

    - filesystem    → capability de filesystem (local por padrão)
    - artifacts     → identificador de biblioteca → artefato de empacotamento
    - framework     → obtenção do bundle de bibliotecas do framework de execução
    - java          → descoberta da instalação Java
    - collaborators → agregado passado ao contexto de execução
"""
