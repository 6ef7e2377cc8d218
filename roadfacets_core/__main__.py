"""Run the RoadFacets command line viewer."""

from roadfacets_core.cli import main

main()
