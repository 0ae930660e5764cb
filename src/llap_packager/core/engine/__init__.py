"""
Engine do LLAP Packager.

Este pacote contém o executor ordenado de Steps do assembly.

Princípios fundamentais:
    - A ordem de execução é a ordem de registro (determinística)
    - Steps mandatory abortam a run na primeira falha
    - Steps optional falham com warning, sem interromper a run
    - Nenhuma decisão silenciosa é tomada durante a execução

Invariantes:
    - Cada Step é executado no máximo uma vez por run
    - O resultado da execução reflete explicitamente o estado de cada Step
"""
