"""
Package des stratégies spécifiques par plateforme

Chaque stratégie utilise les outils natifs de son système :
- Linux (uname, /proc/cpuinfo, /etc/issue)
- macOS (uname, system_profiler)
- FreeBSD (uname, sysctl)
- Windows et systèmes non reconnus (aucun outil)
"""
